# 📄 File: user_service/shared/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the folder that holds the plumbing to outside systems, which here is the database.
# 🧪 Purpose (Technical Summary):
# Infrastructure package initialization for persistence adapters.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# user_service.shared.infrastructure.database
