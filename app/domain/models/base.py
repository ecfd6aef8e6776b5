"""
Base entity and domain errors for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Any, Dict, List
from abc import ABC
from dataclasses import dataclass, field
from enum import Enum


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the storage format)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(eq=False)
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.id is not None and self.id < 0:
            raise ValidationError("Entity ID cannot be negative", "id")
        if self.created_at is None:
            self.created_at = utc_now()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if self is other:
            return True
        if not isinstance(other, self.__class__):
            return False
        if not self.is_persisted() or not other.is_persisted():
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if not self.is_persisted():
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """
        Refresh the updated_at timestamp.
        The new value is always strictly later than the previous one.
        """
        now = utc_now()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now

    def is_persisted(self) -> bool:
        """Check if entity has an ID assigned by the persistence layer."""
        return self.id is not None and self.id > 0

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return not self.is_persisted()

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for key, value in self.__dict__.items():
            if not key.startswith('_'):
                if isinstance(value, datetime):
                    data[key] = value.isoformat()
                else:
                    data[key] = value
        return data


class ErrorCode(str, Enum):
    """Discriminator for domain failures."""
    DOMAIN_ERROR = "DOMAIN_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    DUPLICATE_ENTITY = "DUPLICATE_ENTITY"


class DomainException(Exception):
    """Base exception for domain errors."""

    code: ErrorCode = ErrorCode.DOMAIN_ERROR

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class InvalidArgumentError(DomainException):
    """Exception raised when an argument such as an ID is malformed."""

    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class ValidationError(DomainException):
    """Exception raised when input or entity validation fails."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.field = field
        self.errors = errors or [message]


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    code = ErrorCode.ENTITY_NOT_FOUND

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Exception raised when trying to create a duplicate entity."""

    code = ErrorCode.DUPLICATE_ENTITY

    def __init__(self, entity_type: str, field: str, value: Any):
        message = f"{entity_type} with {field} '{value}' already exists"
        super().__init__(message)
        self.entity_type = entity_type
        self.field = field
        self.value = value
