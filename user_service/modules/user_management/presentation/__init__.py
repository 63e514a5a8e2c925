# 📄 File: user_service/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the parts of the user module that talk to the outside world over HTTP.
# 🧪 Purpose (Technical Summary):
# Presentation layer initialization: API endpoints, schemas and dependency providers.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# user_service.api.v1.router
