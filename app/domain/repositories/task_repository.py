"""
Task repository interface.
Defines the contract for task data persistence operations.

The contract is structural: any object providing these coroutines can be
handed to the use cases, no base class required. Implementations never wrap
storage errors; they propagate to the caller unchanged.
"""

from typing import List, Optional, Protocol

from app.domain.models.task import Task


class TaskRepository(Protocol):
    """
    Repository interface for Task entity.
    Defines all operations needed for task data persistence.
    """

    async def save(self, task: Task) -> Task:
        """
        Insert a new task.
        Returns the task with its assigned ID and stored timestamps.
        """
        ...

    async def update(self, task: Task) -> Task:
        """
        Persist the mutable fields of an existing task.
        The caller is responsible for checking that the task exists.
        """
        ...

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        """
        Find a task by its ID.
        Returns None if not found.
        """
        ...

    async def find_all(self) -> List[Task]:
        """
        Find all tasks, newest first.
        """
        ...

    async def delete(self, task_id: int) -> None:
        """
        Delete a task by its ID.
        Deleting an ID that does not exist is a no-op.
        """
        ...

    async def exists(self, task_id: int) -> bool:
        """
        Check if a task with the given ID exists.
        """
        ...

    async def find_by_title(self, title: str) -> Optional[Task]:
        """
        Find a task by exact (case-sensitive) title.
        Returns None if not found.
        """
        ...
