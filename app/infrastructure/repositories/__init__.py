"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .task_repository import SQLAlchemyTaskRepository

__all__ = [
    "SQLAlchemyTaskRepository",
]
