"""SQLAlchemy table and repository implementation for users."""
