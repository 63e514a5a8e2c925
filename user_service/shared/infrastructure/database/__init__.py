"""
Database infrastructure: engine lifecycle, request-scoped sessions and the
statement execution boundary.
"""

from .connection import Base, close_database, db_manager, initialize_database
from .executor import StatementExecutor, translate_store_error
from .session import get_db_session, initialize_sessions, session_manager

__all__ = [
    "Base",
    "db_manager",
    "initialize_database",
    "close_database",
    "StatementExecutor",
    "translate_store_error",
    "session_manager",
    "initialize_sessions",
    "get_db_session",
]
