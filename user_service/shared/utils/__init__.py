# 📄 File: user_service/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the small helper tools: field checkers for user data and the logging setup.
# 🧪 Purpose (Technical Summary):
# Utilities package exposing the field validation predicates and logging configuration.
# 🔗 Dependencies:
# validators, logging submodules
# 🔄 Connected Modules / Calls From:
# User domain model, credential engine, main.py

from .validators import (
    validate_email,
    validate_telephone,
    validate_username,
    validate_password,
)

__all__ = [
    "validate_email",
    "validate_telephone",
    "validate_username",
    "validate_password",
]
