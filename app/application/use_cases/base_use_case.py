"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC
from typing import Any

from app.application.dto.base_dto import RequestDTO
from app.domain.models.base import InvalidArgumentError, ValidationError
from app.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class BaseUseCase(ABC):
    """
    Base class for all use cases.
    Holds the repository and the shared request checks.
    """

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    @staticmethod
    def _validate_id(entity_id: Any, message: str = "ID must be a positive integer") -> int:
        """Ensure an ID is a positive integer."""
        # bool is a subclass of int
        if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
            raise InvalidArgumentError(message, "id")
        return entity_id

    @staticmethod
    def _validate_request(request: RequestDTO) -> None:
        """
        Run the request's business-rule checks.
        Raises ValidationError listing every violation.
        """
        errors = request.validation_errors()
        if errors:
            logger.debug(f"Rejected {type(request).__name__}: {errors}")
            raise ValidationError(
                f"Validation failed: {', '.join(errors)}",
                "title",
                errors=errors
            )


class QueryUseCase(BaseUseCase):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase):
    """
    Base class for command use cases (write operations).
    """
    pass
