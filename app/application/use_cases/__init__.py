"""
Application layer use cases.
Business logic for the tasks service.
"""

from .base_use_case import *
from .task_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",

    # Task Use Cases
    "CreateTaskUseCase",
    "GetAllTasksUseCase",
    "GetTaskByIdUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
]
