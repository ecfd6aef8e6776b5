"""
Unit tests for task DTOs.
"""

import pytest
from datetime import datetime
from pydantic import ValidationError as PydanticValidationError

from app.application.dto.base_dto import ApiResponseDTO
from app.application.dto.task_dto import (
    TITLE_MAX_LENGTH,
    CreateTaskRequestDTO,
    TaskResponseDTO,
    UpdateTaskRequestDTO,
    title_errors,
)
from app.domain.models.task import Task


class TestTitleRules:
    """Test cases for the shared title rules."""

    def test_valid_title(self):
        assert title_errors("Buy milk") == []

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_missing_title(self, title):
        assert title_errors(title) == ["Title is required"]

    def test_title_at_limit(self):
        assert title_errors("x" * 255) == []

    def test_title_over_limit(self):
        assert title_errors("x" * 256) == ["Title cannot exceed 255 characters"]


class TestCreateTaskRequestDTO:
    """Test cases for CreateTaskRequestDTO."""

    def test_valid_request(self):
        request = CreateTaskRequestDTO(title="Buy milk", description="Two litres")

        assert request.validation_errors() == []

    def test_missing_title_is_a_rule_violation(self):
        """Missing title reaches the use case instead of failing to parse."""
        request = CreateTaskRequestDTO()

        assert request.validation_errors() == ["Title is required"]

    def test_unknown_fields_rejected(self):
        with pytest.raises(PydanticValidationError):
            CreateTaskRequestDTO(title="Buy milk", priority="high")


class TestUpdateTaskRequestDTO:
    """Test cases for field presence on UpdateTaskRequestDTO."""

    def test_empty_payload_has_nothing(self):
        request = UpdateTaskRequestDTO()

        assert not request.has_title
        assert not request.has_description
        assert not request.has_completed
        assert request.is_status_toggle_only() is False

    def test_completed_only_is_status_toggle(self):
        request = UpdateTaskRequestDTO(completed=False)

        assert request.has_completed
        assert request.is_status_toggle_only() is True

    def test_completed_with_title_is_full_update(self):
        request = UpdateTaskRequestDTO(title="New", completed=True)

        assert request.is_status_toggle_only() is False

    def test_completed_with_cleared_description_is_full_update(self):
        """An explicit null description counts as present."""
        request = UpdateTaskRequestDTO.model_validate({"description": None, "completed": True})

        assert request.has_description
        assert request.description is None
        assert request.is_status_toggle_only() is False

    def test_empty_title_with_completed_is_invalid(self):
        request = UpdateTaskRequestDTO(title="", completed=True)

        assert request.is_status_toggle_only() is False
        assert request.validation_errors() == ["Title is required"]

    def test_null_title_is_invalid(self):
        request = UpdateTaskRequestDTO.model_validate({"title": None})

        assert request.has_title
        assert request.validation_errors() == ["Title is required"]

    @pytest.mark.parametrize("payload", [
        {},
        {"description": "Only the description"},
        {"description": None},
        {"description": "New", "completed": True},
    ])
    def test_full_update_without_title_is_invalid(self, payload):
        """Only a status toggle may leave the title out."""
        request = UpdateTaskRequestDTO.model_validate(payload)

        assert request.is_status_toggle_only() is False
        assert request.validation_errors() == ["Title is required"]

    def test_status_toggle_needs_no_title(self):
        request = UpdateTaskRequestDTO(completed=True)

        assert request.validation_errors() == []

    def test_null_completed_rejected(self):
        with pytest.raises(PydanticValidationError):
            UpdateTaskRequestDTO.model_validate({"completed": None})

    def test_parsed_from_json(self):
        request = UpdateTaskRequestDTO.model_validate_json('{"completed": true}')

        assert request.completed is True
        assert request.is_status_toggle_only() is True


class TestTaskResponseDTO:
    """Test cases for response mapping."""

    def test_from_domain(self):
        task = Task.from_persistence({
            "id": 3,
            "title": "Buy milk",
            "description": None,
            "completed": True,
            "created_at": datetime(2024, 1, 1, 9, 0, 0),
            "updated_at": datetime(2024, 1, 2, 9, 0, 0),
        })

        response = TaskResponseDTO.from_domain(task)

        assert response.id == 3
        assert response.title == "Buy milk"
        assert response.description is None
        assert response.completed is True
        assert response.created_at == task.created_at
        assert response.updated_at == task.updated_at


class TestApiResponseDTO:
    """Test cases for the response envelope."""

    def test_only_given_fields_are_set(self):
        envelope = ApiResponseDTO.create(message="Task deleted successfully")

        assert envelope.model_dump(exclude_unset=True) == {
            "success": True,
            "message": "Task deleted successfully",
        }

    def test_list_envelope_with_count(self):
        envelope = ApiResponseDTO.create(data=[], count=0)

        assert envelope.model_dump(exclude_unset=True) == {
            "success": True,
            "data": [],
            "count": 0,
        }


class TestTitleSchema:
    """The published schema mirrors the title rules."""

    @pytest.mark.parametrize("dto_class", [CreateTaskRequestDTO, UpdateTaskRequestDTO])
    def test_title_length_hints(self, dto_class):
        title_schema = dto_class.model_json_schema()["properties"]["title"]

        assert title_schema["minLength"] == 1
        assert title_schema["maxLength"] == TITLE_MAX_LENGTH
