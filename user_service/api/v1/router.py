# 📄 File: user_service/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending user
# requests to the user handlers.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines the module routers for the FastAPI application.
# 🔗 Dependencies:
# FastAPI, user_service.modules.user_management.presentation.api.v1.users
# 🔄 Connected Modules / Calls From:
# user_service.main

from fastapi import APIRouter

from user_service.modules.user_management.presentation.api.v1.users import users_router

# Create main API v1 router
api_v1_router = APIRouter()

api_v1_router.include_router(users_router)
