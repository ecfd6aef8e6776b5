"""
Database infrastructure for the tasks service.
"""

from .database import Base, DatabaseSessionManager, get_db_session, get_session_manager
from .models import TaskModel

__all__ = [
    "Base",
    "DatabaseSessionManager",
    "get_db_session",
    "get_session_manager",
    "TaskModel",
]
