"""
Domain models for the tasks service.
This module exports the domain entity and the domain error taxonomy.
"""

# Base classes
from .base import (
    BaseEntity,
    ErrorCode,
    DomainException,
    InvalidArgumentError,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    utc_now
)

# Domain entities
from .task import Task

__all__ = [
    # Base classes
    "BaseEntity",
    "ErrorCode",
    "DomainException",
    "InvalidArgumentError",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "utc_now",

    # Task
    "Task",
]
