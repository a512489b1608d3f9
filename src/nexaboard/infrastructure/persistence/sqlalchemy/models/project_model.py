"""SQLAlchemy models for projects and their team membership."""

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nexaboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ProjectModel(Base, TimestampMixin):
    """Database model for projects."""

    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    total_progress: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    manager_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    manager_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    members: Mapped[list["ProjectMemberModel"]] = relationship(
        back_populates="project",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ProjectMemberModel.position",
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, name={self.name})>"


class ProjectMemberModel(Base):
    """One team member of a project."""

    __tablename__ = "project_members"

    project_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, index=True)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    project: Mapped[ProjectModel] = relationship(back_populates="members")
