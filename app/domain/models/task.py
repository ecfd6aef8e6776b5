"""
Task domain model.
Represents a single to-do item with a completion flag.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from app.domain.models.base import BaseEntity, utc_now


@dataclass(eq=False)
class Task(BaseEntity):
    """
    Task entity.

    Title rules (non-empty, max length, uniqueness) are checked by the
    application layer before the entity is created or mutated.
    """

    title: str = ""
    description: Optional[str] = None
    completed: bool = False

    @classmethod
    def create(cls, title: str, description: Optional[str] = None) -> "Task":
        """Create a new, not yet persisted task."""
        now = utc_now()
        return cls(
            title=title,
            description=description,
            completed=False,
            created_at=now,
            updated_at=now
        )

    @classmethod
    def from_persistence(cls, data: Dict[str, Any]) -> "Task":
        """Rebuild a task from stored data without touching its timestamps."""
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description"),
            completed=bool(data.get("completed", False)),
            created_at=data["created_at"],
            updated_at=data["updated_at"]
        )

    def to_persistence(self) -> Dict[str, Any]:
        """Convert the task to a plain mapping of its stored fields."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def update(self, title: str, description: Optional[str], completed: bool) -> None:
        """Replace the mutable fields and bump updated_at."""
        self.title = title
        self.description = description
        self.completed = completed
        self.mark_as_updated()

    def __str__(self) -> str:
        return f"Task(id={self.id}, title={self.title!r}, completed={self.completed})"
