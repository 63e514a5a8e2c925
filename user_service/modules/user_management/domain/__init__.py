# 📄 File: user_service/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for user accounts: what a valid user looks like and what may
# happen to one.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization containing the User entity, the repository interface and
# the user domain service.
# 🔗 Dependencies:
# Domain models, repositories, services subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, Presentation layer
