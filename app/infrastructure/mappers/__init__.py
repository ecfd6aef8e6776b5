"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .task_mapper import TaskMapper

__all__ = [
    "TaskMapper",
]
