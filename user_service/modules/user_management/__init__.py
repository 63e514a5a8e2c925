# 📄 File: user_service/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the user management system that handles user accounts and checks logins.
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module, laid out in domain,
# infrastructure and presentation layers.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, user_service.shared.core, pydantic, passlib
# 🔄 Connected Modules / Calls From:
# user_service.api.v1.router, user_service.main

"""
User Management Module

Architecture:
- Domain: User entity and its validation rules, repository interface, UserService
- Infrastructure: users table and the SQLAlchemy repository
- Presentation: API endpoints, request/response schemas, dependency wiring
"""
