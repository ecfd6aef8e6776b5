"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

from app.domain.models.base import utc_now


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Reject unknown fields
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""

    def is_provided(self, field_name: str) -> bool:
        """
        Check whether a field was explicitly supplied by the caller.
        An explicit null counts as supplied; an omitted field does not.
        """
        return field_name in self.model_fields_set

    def validation_errors(self) -> List[str]:
        """Return business-rule violations. Override in subclasses."""
        return []


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """Base class for update request DTOs."""
    pass


T = TypeVar('T')


class ApiResponseDTO(BaseDTO, Generic[T]):
    """Envelope wrapping every successful API response."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    data: Optional[T] = Field(default=None, description="Response payload")
    message: Optional[str] = Field(default=None, description="Human readable message")
    count: Optional[int] = Field(default=None, description="Number of items in data")

    @classmethod
    def create(
        cls,
        data: Optional[T] = None,
        message: Optional[str] = None,
        count: Optional[int] = None
    ) -> "ApiResponseDTO[T]":
        """Create an envelope carrying only the fields that were given."""
        fields: Dict[str, Any] = {"success": True}
        if data is not None:
            fields["data"] = data
        if message is not None:
            fields["message"] = message
        if count is not None:
            fields["count"] = count
        return cls(**fields)


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    timestamp: datetime = Field(default_factory=utc_now, description="Check timestamp")
    uptime: float = Field(description="Seconds since the process started")
    environment: str = Field(description="Current environment")
    version: Optional[str] = Field(default=None, description="Application version")


class ErrorResponseDTO(BaseDTO):
    """Error response DTO."""

    success: bool = Field(default=False)
    error: str = Field(description="Error type")
    message: str = Field(description="Error message")
    code: Optional[str] = Field(default=None, description="Machine readable error code")
    path: Optional[str] = Field(default=None, description="Request path")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(default_factory=utc_now, description="Error timestamp")
