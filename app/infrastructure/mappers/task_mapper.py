"""
Task mapper for converting between domain entities and database models.
"""

from app.domain.models.task import Task
from app.infrastructure.db.models import TaskModel


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to a new TaskModel."""
        data = task.to_persistence()
        # Let the database assign the primary key on insert
        if not task.is_persisted():
            data.pop("id")
        return TaskModel(**data)

    def apply_to_model(self, task: Task, model: TaskModel) -> TaskModel:
        """Copy the mutable fields of a task onto an existing TaskModel."""
        model.title = task.title
        model.description = task.description
        model.completed = task.completed
        model.updated_at = task.updated_at
        return model

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity."""
        return Task.from_persistence({
            "id": model.id,
            "title": model.title,
            "description": model.description,
            "completed": model.completed,
            "created_at": model.created_at,
            "updated_at": model.updated_at,
        })
