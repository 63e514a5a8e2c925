# 📄 File: user_service/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that the user module
# relies on, like settings, error types, password hashing and the database connection.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure and cross-cutting
# concerns used by the User Service modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - user_service.modules.user_management
# - user_service.main

"""
Shared Kernel

- Configuration management (config)
- Error taxonomy and credential engine (core)
- Database connection, sessions and statement execution (infrastructure)
- Field validators and logging setup (utils)
"""
