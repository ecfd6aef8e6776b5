"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .task_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "ApiResponseDTO",
    "HealthCheckResponseDTO",
    "ErrorResponseDTO",

    # Task DTOs
    "TITLE_MAX_LENGTH",
    "title_errors",
    "CreateTaskRequestDTO",
    "UpdateTaskRequestDTO",
    "TaskResponseDTO",
]
