# 📄 File: user_service/modules/user_management/infrastructure/database/models.py
#
# 🧭 Purpose (Layman Explanation):
# This file defines how user accounts are stored in the database: one row per user with
# their login name, scrambled password, names, email and phone number.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the single `users` table. The unique constraints on username
# and email are what the store enforces for duplicate detection.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - user_service.shared.infrastructure.database.connection (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD statements)
# - user_service.shared.infrastructure.database.connection (schema creation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: identity and credential data for one user

The table is created at startup when missing; there is no migration tooling.
"""

from sqlalchemy import Column, Integer, Text

from user_service.shared.infrastructure.database.connection import Base


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """
    SQLAlchemy model for user identity records.

    Columns mirror the domain User; `password_hash` holds the base64-url
    encoded bcrypt hash and is never selected by list queries.
    """
    __tablename__ = "users"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier"
    )
    username = Column(
        Text,
        unique=True,
        nullable=False,
        comment="Login name (5-25 alphanumeric characters)"
    )
    password_hash = Column(
        Text,
        nullable=False,
        comment="base64-url encoded bcrypt hash"
    )
    firstname = Column(Text, nullable=False)
    middlename = Column(Text, nullable=True)
    lastname = Column(Text, nullable=False)
    email = Column(
        Text,
        unique=True,
        nullable=False,
        comment="Email address (exactly one @)"
    )
    telephone = Column(
        Text,
        nullable=False,
        comment="North American phone number with optional extension"
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username})>"


users_table = UserModel.__table__
