"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.models.base import utc_now
from app.infrastructure.db.database import Base


class TaskModel(Base):
    """Task table"""
    __tablename__ = 'tasks'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Unique index backs the use-case level duplicate check
    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)

    # Indexes
    __table_args__ = (
        Index('idx_tasks_created_at', 'created_at'),
    )

    def __repr__(self) -> str:
        return f"<TaskModel(id={self.id}, title={self.title!r}, completed={self.completed})>"
