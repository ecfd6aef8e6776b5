"""
Task DTOs for the application layer.
Data Transfer Objects for task-related operations.
"""

from typing import Optional, List
from pydantic import Field, field_validator

from app.domain.models.task import Task
from .base_dto import ResponseDTO, CreateRequestDTO, UpdateRequestDTO


TITLE_MAX_LENGTH = 255


def title_errors(title: Optional[str]) -> List[str]:
    """Check a task title against the title rules."""
    errors: List[str] = []

    if not title or not title.strip():
        errors.append("Title is required")

    if title and len(title) > TITLE_MAX_LENGTH:
        errors.append(f"Title cannot exceed {TITLE_MAX_LENGTH} characters")

    return errors


# Request DTOs
class CreateTaskRequestDTO(CreateRequestDTO):
    """DTO for task creation requests."""

    title: Optional[str] = Field(
        default=None,
        description="Task title",
        json_schema_extra={"minLength": 1, "maxLength": TITLE_MAX_LENGTH}
    )
    description: Optional[str] = Field(default=None, description="Task description")

    def validation_errors(self) -> List[str]:
        return title_errors(self.title)


class UpdateTaskRequestDTO(UpdateRequestDTO):
    """
    DTO for task update requests.

    Every field is tri-state: omitted, set to a value, or (description only)
    explicitly cleared with null. Use the has_* properties to tell an omitted
    field from one set to a falsy value.
    """

    title: Optional[str] = Field(
        default=None,
        description="New task title, required unless only completed is sent",
        json_schema_extra={"minLength": 1, "maxLength": TITLE_MAX_LENGTH}
    )
    description: Optional[str] = Field(default=None, description="New description, null clears it")
    completed: Optional[bool] = Field(default=None, description="New completion status")

    @field_validator("completed", mode="before")
    @classmethod
    def reject_null_completed(cls, v):
        """Completed may be omitted but never null."""
        if v is None:
            raise ValueError("completed cannot be null")
        return v

    @property
    def has_title(self) -> bool:
        return self.is_provided("title")

    @property
    def has_description(self) -> bool:
        return self.is_provided("description")

    @property
    def has_completed(self) -> bool:
        return self.is_provided("completed")

    def is_status_toggle_only(self) -> bool:
        """True when only the completion flag is being changed."""
        return self.has_completed and not (self.has_title or self.has_description)

    def validation_errors(self) -> List[str]:
        """A status toggle needs no title; every other update must carry one."""
        if self.is_status_toggle_only():
            return []
        return title_errors(self.title)


# Response DTOs
class TaskResponseDTO(ResponseDTO):
    """DTO for task response."""

    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    completed: bool = Field(description="Whether the task is completed")

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        """Build the response shape from a task entity."""
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at
        )
