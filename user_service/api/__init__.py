# 📄 File: user_service/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package holding the web-facing pieces shared by every
# endpoint, like request logging and the version 1 router.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer: versioned router aggregation and middleware.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# user_service.main

"""
User Service API Package

Structure:
    api/
    ├── middleware/
    │   └── logging.py       # Request id and access logging
    └── v1/
        └── router.py        # Mounted under /api/v1
"""
