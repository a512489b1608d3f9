"""SQLAlchemy model for feed messages."""

from typing import Optional
from uuid import UUID

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nexaboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class MessageModel(Base, TimestampMixin):
    """Database model for messages."""

    __tablename__ = "messages"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    sender_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    sender_name: Mapped[str] = mapped_column(String(255), nullable=False)
    sender_role: Mapped[str] = mapped_column(String(20), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    project_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        nullable=True,
        index=True,
    )
    project_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
