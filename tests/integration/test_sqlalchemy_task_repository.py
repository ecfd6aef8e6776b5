"""
Integration tests for the SQLAlchemy task repository.
"""

import pytest
from datetime import datetime

from app.domain.models.task import Task


class TestSQLAlchemyTaskRepository:
    """Test cases against an in-memory SQLite database."""

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, task_repository):
        saved = await task_repository.save(Task.create("Buy milk", "Two litres"))

        assert saved.id == 1
        assert saved.is_persisted()
        assert saved.title == "Buy milk"
        assert saved.description == "Two litres"
        assert saved.completed is False

    @pytest.mark.asyncio
    async def test_find_by_id_round_trip(self, task_repository):
        saved = await task_repository.save(Task.create("Buy milk"))

        found = await task_repository.find_by_id(saved.id)

        assert found == saved
        assert found.title == saved.title
        assert found.description is None
        assert found.created_at == saved.created_at
        assert found.updated_at == saved.updated_at

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, task_repository):
        assert await task_repository.find_by_id(404) is None

    @pytest.mark.asyncio
    async def test_find_all_newest_first(self, task_repository):
        for i, title in enumerate(("T1", "T2", "T3")):
            task = Task.create(title)
            task.created_at = task.updated_at = datetime(2024, 1, 1, 9, i, 0)
            await task_repository.save(task)

        tasks = await task_repository.find_all()

        assert [t.title for t in tasks] == ["T3", "T2", "T1"]

    @pytest.mark.asyncio
    async def test_find_all_same_timestamp_breaks_tie_by_id(self, task_repository):
        stamp = datetime(2024, 1, 1, 9, 0, 0)
        for title in ("T1", "T2"):
            task = Task.create(title)
            task.created_at = task.updated_at = stamp
            await task_repository.save(task)

        tasks = await task_repository.find_all()

        assert [t.title for t in tasks] == ["T2", "T1"]

    @pytest.mark.asyncio
    async def test_update_persists_fields(self, task_repository):
        saved = await task_repository.save(Task.create("Buy milk", "Two litres"))
        saved.update("Buy oat milk", None, True)

        await task_repository.update(saved)
        found = await task_repository.find_by_id(saved.id)

        assert found.title == "Buy oat milk"
        assert found.description is None
        assert found.completed is True
        assert found.updated_at > found.created_at

    @pytest.mark.asyncio
    async def test_update_vanished_row(self, task_repository):
        stamp = datetime(2024, 1, 1, 9, 0, 0)
        task = Task.from_persistence({
            "id": 77,
            "title": "Ghost",
            "created_at": stamp,
            "updated_at": stamp,
        })

        with pytest.raises(LookupError):
            await task_repository.update(task)

    @pytest.mark.asyncio
    async def test_delete_and_exists(self, task_repository):
        saved = await task_repository.save(Task.create("Buy milk"))

        assert await task_repository.exists(saved.id) is True
        await task_repository.delete(saved.id)

        assert await task_repository.exists(saved.id) is False
        assert await task_repository.find_by_id(saved.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, task_repository):
        saved = await task_repository.save(Task.create("Buy milk"))

        await task_repository.delete(999)

        assert len(await task_repository.find_all()) == 1
        assert await task_repository.exists(saved.id) is True

    @pytest.mark.asyncio
    async def test_find_by_title_is_exact(self, task_repository):
        saved = await task_repository.save(Task.create("Buy milk"))

        assert await task_repository.find_by_title("Buy milk") == saved
        assert await task_repository.find_by_title("buy milk") is None
        assert await task_repository.find_by_title("Buy") is None
