# 📄 File: user_service/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'user_service' folder contains the User Service code and records
# its version and name.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the User Service FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Packaging metadata

"""
User Service - user identity management over HTTP

Creates, lists, updates and deletes user records, stores salted password
hashes and checks username/password pairs.
"""

__version__ = "1.0.0"
__title__ = "User Service"
__description__ = "User identity CRUD and authentication service"
