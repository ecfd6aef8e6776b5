"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .task_repository import TaskRepository

__all__ = [
    "TaskRepository",
]
