"""Persistence tests for the project, task and message repositories."""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from nexaboard.domain.message import Message, MessageType
from nexaboard.domain.project import Project
from nexaboard.domain.task import Task, TaskPriority, TaskStatus
from nexaboard.infrastructure.persistence.sqlalchemy.repositories import (
    MessageRepositorySQLAlchemy,
    ProjectRepositorySQLAlchemy,
    TaskRepositorySQLAlchemy,
)

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


class TestProjectRepository:
    @pytest.mark.asyncio
    async def test_save_and_find_with_team(self, test_db_session):
        repo = ProjectRepositorySQLAlchemy(test_db_session)
        alice, bob = uuid4(), uuid4()
        project = Project.create(
            "Relaunch",
            manager_id=uuid4(),
            manager_name="Mona",
            deadline=date(2026, 12, 31),
        )
        project.team_ids = [alice, bob, alice]

        await repo.save(project)
        found = await repo.find_by_id(project.id)

        assert found is not None
        assert found.name == "Relaunch"
        assert found.description == "New project Nexaboard"
        assert found.status == "In Progress"
        assert found.deadline == date(2026, 12, 31)
        assert found.team_ids == [alice, bob]

    @pytest.mark.asyncio
    async def test_update_team(self, test_db_session):
        repo = ProjectRepositorySQLAlchemy(test_db_session)
        alice, bob, carol = uuid4(), uuid4(), uuid4()
        project = Project.create("Relaunch", manager_id=uuid4())
        project.team_ids = [alice, bob]
        await repo.save(project)

        project.team_ids = [carol, alice]
        project.total_progress = 40
        await repo.save(project)
        found = await repo.find_by_id(project.id)

        assert found.team_ids == [carol, alice]
        assert found.total_progress == 40

    @pytest.mark.asyncio
    async def test_find_by_manager_and_member(self, test_db_session):
        repo = ProjectRepositorySQLAlchemy(test_db_session)
        user_id = uuid4()
        managed = Project.create("Managed", manager_id=user_id)
        joined = Project(name="Joined", manager_id=uuid4(), team_ids=[user_id])
        other = Project(name="Other", manager_id=uuid4(), team_ids=[uuid4()])
        for project in (managed, joined, other):
            await repo.save(project)

        by_manager = await repo.find_by_manager(user_id)
        by_member = await repo.find_by_team_member(user_id)

        assert [p.name for p in by_manager] == ["Managed"]
        assert [p.name for p in by_member] == ["Joined"]
        assert await repo.count() == 3

    @pytest.mark.asyncio
    async def test_delete(self, test_db_session):
        repo = ProjectRepositorySQLAlchemy(test_db_session)
        project = Project(name="Doomed", manager_id=uuid4(), team_ids=[uuid4()])
        await repo.save(project)

        assert await repo.delete(project.id) is True
        assert await repo.find_by_id(project.id) is None
        assert await repo.delete(project.id) is False


class TestTaskRepository:
    @pytest.mark.asyncio
    async def test_save_update_and_query(self, test_db_session):
        repo = TaskRepositorySQLAlchemy(test_db_session)
        project_id, assignee_id = uuid4(), uuid4()
        task = Task(title="Draft", project_id=project_id, priority=TaskPriority.HIGH)
        task.assign(assignee_id, "Mel")
        await repo.save(task)

        task.move_to(TaskStatus.DONE)
        await repo.save(task)

        by_project = await repo.find_by_project(project_id)
        by_assignee = await repo.find_by_assignee(assignee_id)

        assert len(by_project) == 1
        assert by_project[0].status == TaskStatus.DONE
        assert by_project[0].priority == TaskPriority.HIGH
        assert by_project[0].assignee_name == "Mel"
        assert [t.id for t in by_assignee] == [task.id]

    @pytest.mark.asyncio
    async def test_delete(self, test_db_session):
        repo = TaskRepositorySQLAlchemy(test_db_session)
        task = Task(title="Draft", project_id=uuid4())
        await repo.save(task)

        assert await repo.delete(task.id) is True
        assert await repo.find_by_id(task.id) is None
        assert await repo.delete(task.id) is False


class TestMessageRepository:
    @pytest.mark.asyncio
    async def test_newest_first_and_project_filter(self, test_db_session):
        repo = MessageRepositorySQLAlchemy(test_db_session)
        project_id = uuid4()
        sender = {"sender_id": uuid4(), "sender_name": "Mona", "sender_role": "manager"}
        old = Message(content="old", created_at=T0, **sender)
        scoped = Message(
            content="scoped",
            type=MessageType.ANNOUNCEMENT,
            project_id=project_id,
            project_name="Relaunch",
            created_at=T0 + timedelta(minutes=5),
            **sender,
        )
        new = Message(content="new", created_at=T0 + timedelta(minutes=10), **sender)
        for message in (scoped, old, new):
            await repo.save(message)

        feed = await repo.find_all()
        project_feed = await repo.find_by_project(project_id)

        assert [m.content for m in feed] == ["new", "scoped", "old"]
        assert [m.content for m in project_feed] == ["scoped"]
        assert project_feed[0].type == MessageType.ANNOUNCEMENT
        assert await repo.count() == 3
