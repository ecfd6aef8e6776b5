"""
Task use cases for the application layer.
Implements business logic for task operations.
"""

import logging
from typing import List

from app.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from app.application.dto.task_dto import (
    CreateTaskRequestDTO, UpdateTaskRequestDTO, TaskResponseDTO
)
from app.domain.models.base import EntityNotFoundError, DuplicateEntityError
from app.domain.models.task import Task

logger = logging.getLogger(__name__)


class CreateTaskUseCase(CommandUseCase):
    """Use case for creating a new task."""

    async def execute(self, request: CreateTaskRequestDTO) -> TaskResponseDTO:
        self._validate_request(request)

        # Titles are unique
        existing_task = await self.task_repository.find_by_title(request.title)
        if existing_task:
            raise DuplicateEntityError("Task", "title", request.title)

        task = Task.create(request.title, request.description)
        saved_task = await self.task_repository.save(task)

        logger.info(f"Task created: id={saved_task.id}")
        return TaskResponseDTO.from_domain(saved_task)


class GetAllTasksUseCase(QueryUseCase):
    """Use case for listing every task, newest first."""

    async def execute(self) -> List[TaskResponseDTO]:
        tasks = await self.task_repository.find_all()
        return [TaskResponseDTO.from_domain(task) for task in tasks]


class GetTaskByIdUseCase(QueryUseCase):
    """Use case for retrieving a single task."""

    async def execute(self, task_id: int) -> TaskResponseDTO:
        self._validate_id(task_id)

        task = await self.task_repository.find_by_id(task_id)
        if not task:
            raise EntityNotFoundError("Task", task_id)

        return TaskResponseDTO.from_domain(task)


class UpdateTaskUseCase(CommandUseCase):
    """
    Use case for updating an existing task.

    A request carrying only ``completed`` is a status toggle: it keeps the
    current title and description and skips title validation and the
    duplicate-title lookup. Any other request is a full update and
    must carry a valid title.
    """

    async def execute(self, task_id: int, request: UpdateTaskRequestDTO) -> TaskResponseDTO:
        self._validate_id(task_id, "Invalid task ID")

        task = await self.task_repository.find_by_id(task_id)
        if not task:
            raise EntityNotFoundError("Task", task_id)

        if request.is_status_toggle_only():
            self._toggle_status(task, request)
        else:
            await self._apply_full_update(task, request)

        updated_task = await self.task_repository.update(task)

        logger.info(f"Task updated: id={updated_task.id}")
        return TaskResponseDTO.from_domain(updated_task)

    @staticmethod
    def _toggle_status(task: Task, request: UpdateTaskRequestDTO) -> None:
        task.update(task.title, task.description, request.completed)

    async def _apply_full_update(self, task: Task, request: UpdateTaskRequestDTO) -> None:
        self._validate_request(request)

        if request.title != task.title:
            task_with_same_title = await self.task_repository.find_by_title(request.title)
            if task_with_same_title and task_with_same_title.id != task.id:
                raise DuplicateEntityError("Task", "title", request.title)

        task.update(
            request.title,
            request.description if request.has_description else task.description,
            request.completed if request.has_completed else task.completed
        )


class DeleteTaskUseCase(CommandUseCase):
    """Use case for deleting a task."""

    async def execute(self, task_id: int) -> None:
        self._validate_id(task_id, "Invalid task ID")

        if not await self.task_repository.exists(task_id):
            raise EntityNotFoundError("Task", task_id)

        await self.task_repository.delete(task_id)
        logger.info(f"Task deleted: id={task_id}")
