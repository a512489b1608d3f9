"""Unit tests for TaskService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from nexaboard.application.services import TaskService
from nexaboard.domain.task import (
    InvalidTaskStatusError,
    Task,
    TaskNotFoundError,
    TaskPriority,
    TaskRepository,
    TaskStatus,
)
from nexaboard_identity import UserRepository


class TestCreateTask:
    """Tests for task creation."""

    def setup_method(self):
        self.task_repo = AsyncMock(spec=TaskRepository)
        self.user_repo = AsyncMock(spec=UserRepository)
        self.service = TaskService(
            task_repository=self.task_repo,
            user_repository=self.user_repo,
        )

    @pytest.mark.asyncio
    async def test_defaults(self):
        task = await self.service.create(title="Write copy", project_id=uuid4())

        assert task.status == TaskStatus.TODO
        assert task.priority == TaskPriority.MEDIUM
        assert task.assignee_id is None
        assert task.assignee_name == "Unassigned"
        self.task_repo.save.assert_awaited_once_with(task)
        self.user_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_resolves_assignee_name(self, member):
        self.user_repo.find_by_id.return_value = member

        task = await self.service.create(
            title="Write copy",
            project_id=uuid4(),
            assignee_id=member.id,
            priority=TaskPriority.URGENT,
        )

        assert task.assignee_id == member.id
        assert task.assignee_name == "Mel Member"
        assert task.priority == TaskPriority.URGENT

    @pytest.mark.asyncio
    async def test_unknown_assignee_is_unassigned(self):
        self.user_repo.find_by_id.return_value = None
        ghost = uuid4()

        task = await self.service.create(
            title="Write copy",
            project_id=uuid4(),
            assignee_id=ghost,
        )

        assert task.assignee_id == ghost
        assert task.assignee_name == "Unassigned"


class TestUpdateTask:
    """Tests for partial updates and status moves."""

    def setup_method(self):
        self.task = Task(
            title="Original",
            project_id=uuid4(),
            description="keep me",
            priority=TaskPriority.LOW,
        )
        self.task_repo = AsyncMock(spec=TaskRepository)
        self.task_repo.find_by_id.return_value = self.task
        self.user_repo = AsyncMock(spec=UserRepository)
        self.service = TaskService(
            task_repository=self.task_repo,
            user_repository=self.user_repo,
        )

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self):
        task = await self.service.update(self.task.id, status=TaskStatus.REVIEW)

        assert task.title == "Original"
        assert task.description == "keep me"
        assert task.priority == TaskPriority.LOW
        assert task.status == TaskStatus.REVIEW
        self.task_repo.save.assert_awaited_once_with(task)

    @pytest.mark.asyncio
    async def test_blank_title_ignored(self):
        task = await self.service.update(self.task.id, title="   ")

        assert task.title == "Original"

    @pytest.mark.asyncio
    async def test_reassign_resolves_name(self, member):
        self.user_repo.find_by_id.return_value = member

        task = await self.service.update(self.task.id, assignee_id=member.id)

        assert task.assignee_name == "Mel Member"

    @pytest.mark.asyncio
    async def test_update_missing_task(self):
        self.task_repo.find_by_id.return_value = None

        with pytest.raises(TaskNotFoundError):
            await self.service.update(uuid4(), title="New")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["DONE", "done", " in_progress "])
    async def test_change_status_parses(self, raw):
        task = await self.service.change_status(self.task.id, raw)

        assert task.status in (TaskStatus.DONE, TaskStatus.IN_PROGRESS)

    @pytest.mark.asyncio
    async def test_change_status_invalid(self):
        with pytest.raises(InvalidTaskStatusError) as exc_info:
            await self.service.change_status(self.task.id, "ARCHIVED")

        assert exc_info.value.code.value == "VALIDATION_ERROR"
        self.task_repo.save.assert_not_awaited()
