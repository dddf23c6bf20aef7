"""Todo ORM — the single persisted table.

Invariants:
    - id is a UUID primary key generated at insert (uuid4), never reassigned
    - completed defaults to False
    - created_at is set once at insert (client default + server default)

Design Decisions:
    - Index on created_at: the only query orders by it
    - Rows never leave the store layer; infrastructure/todo_store.py maps them to TodoRecord
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from todo_app.db.base import Base


class Todo(Base):
    """Todo row."""
    __tablename__ = "todos"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        index=True,
    )
