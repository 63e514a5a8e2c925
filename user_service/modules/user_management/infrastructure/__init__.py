# 📄 File: user_service/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the code that actually saves and loads users from the database.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer initialization for the user management module.
# 🔗 Dependencies:
# SQLAlchemy, shared database infrastructure
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, main.py (table registration)
