"""
Task management router.
Handles CRUD operations for task resources.

Domain failures are not caught here; the error handler middleware maps them
to HTTP responses.
"""

import re
from typing import Annotated, List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dto.base_dto import ApiResponseDTO
from app.application.dto.task_dto import (
    CreateTaskRequestDTO,
    UpdateTaskRequestDTO,
    TaskResponseDTO
)
from app.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    GetAllTasksUseCase,
    GetTaskByIdUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase
)
from app.domain.models.base import InvalidArgumentError
from app.domain.repositories.task_repository import TaskRepository
from app.infrastructure.db.database import get_db_session
from app.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository


router = APIRouter()


def get_task_repository(session: AsyncSession = Depends(get_db_session)) -> TaskRepository:
    """Dependency to get task repository."""
    return SQLAlchemyTaskRepository(session)


TASK_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_task_id(task_id: str) -> int:
    """Parse the path ID. Only ASCII digits with an optional minus sign are accepted."""
    if not TASK_ID_PATTERN.fullmatch(task_id):
        raise InvalidArgumentError("Invalid ID format. ID must be a number.", "id")
    return int(task_id)


Repository = Annotated[TaskRepository, Depends(get_task_repository)]


@router.get(
    "",
    response_model=ApiResponseDTO[List[TaskResponseDTO]],
    response_model_exclude_unset=True
)
async def list_tasks(repository: Repository):
    """
    List all tasks, newest first.
    """
    use_case = GetAllTasksUseCase(repository)
    tasks = await use_case.execute()
    return ApiResponseDTO[List[TaskResponseDTO]].create(data=tasks, count=len(tasks))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponseDTO[TaskResponseDTO],
    response_model_exclude_unset=True
)
async def create_task(request: CreateTaskRequestDTO, repository: Repository):
    """
    Create a new task.

    - **title**: Task title (required, unique, max 255 characters)
    - **description**: Task description
    """
    use_case = CreateTaskUseCase(repository)
    task = await use_case.execute(request)
    return ApiResponseDTO[TaskResponseDTO].create(data=task, message="Task created successfully")


@router.get(
    "/{task_id}",
    response_model=ApiResponseDTO[TaskResponseDTO],
    response_model_exclude_unset=True
)
async def get_task(task_id: str, repository: Repository):
    """
    Get a specific task by ID.

    - **task_id**: Task ID to retrieve
    """
    use_case = GetTaskByIdUseCase(repository)
    task = await use_case.execute(parse_task_id(task_id))
    return ApiResponseDTO[TaskResponseDTO].create(data=task)


@router.put(
    "/{task_id}",
    response_model=ApiResponseDTO[TaskResponseDTO],
    response_model_exclude_unset=True
)
async def update_task(task_id: str, request: UpdateTaskRequestDTO, repository: Repository):
    """
    Update an existing task.

    Sending only **completed** toggles the status and leaves everything else
    untouched. Any other combination is a full update and must include a title.

    - **task_id**: Task ID to update
    - **title**: Updated task title
    - **description**: Updated description (null clears it)
    - **completed**: Updated completion status
    """
    use_case = UpdateTaskUseCase(repository)
    task = await use_case.execute(parse_task_id(task_id), request)
    return ApiResponseDTO[TaskResponseDTO].create(data=task, message="Task updated successfully")


@router.delete(
    "/{task_id}",
    response_model=ApiResponseDTO,
    response_model_exclude_unset=True
)
async def delete_task(task_id: str, repository: Repository):
    """
    Delete a task.

    - **task_id**: Task ID to delete
    """
    use_case = DeleteTaskUseCase(repository)
    await use_case.execute(parse_task_id(task_id))
    return ApiResponseDTO.create(message="Task deleted successfully")
