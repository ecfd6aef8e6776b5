"""
Task repository implementation using SQLAlchemy.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models.task import Task
from app.infrastructure.db.models import TaskModel
from app.infrastructure.mappers.task_mapper import TaskMapper

logger = logging.getLogger(__name__)


class SQLAlchemyTaskRepository:
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = TaskMapper()

    async def save(self, task: Task) -> Task:
        """Insert a new task."""
        model = self.mapper.domain_to_model(task)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    async def update(self, task: Task) -> Task:
        """Persist the mutable fields of an existing task."""
        model = await self.session.get(TaskModel, task.id)
        if model is None:
            # Callers check existence first; a vanished row is a storage-level race
            raise LookupError(f"Task row {task.id} disappeared before update")

        self.mapper.apply_to_model(task, model)
        await self.session.commit()
        await self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID."""
        model = await self.session.get(TaskModel, task_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_all(self) -> List[Task]:
        """Get all tasks, newest first."""
        result = await self.session.execute(
            select(TaskModel).order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def delete(self, task_id: int) -> None:
        """Delete task by ID. Missing IDs are ignored."""
        result = await self.session.execute(
            delete(TaskModel).where(TaskModel.id == task_id)
        )
        await self.session.commit()
        if not result.rowcount:
            logger.debug(f"Delete of missing task {task_id} ignored")

    async def exists(self, task_id: int) -> bool:
        """Check whether a task with this ID exists."""
        count = await self.session.scalar(
            select(func.count(TaskModel.id)).where(TaskModel.id == task_id)
        )
        return bool(count)

    async def find_by_title(self, title: str) -> Optional[Task]:
        """Find task by exact title."""
        result = await self.session.execute(
            select(TaskModel).where(TaskModel.title == title).limit(1)
        )
        model = result.scalar_one_or_none()
        return self.mapper.model_to_domain(model) if model else None
