"""Todo Store — SQLAlchemy implementation of TodoRepository.

Invariants:
    - Every write commits immediately (each operation touches one row)
    - Rows are mapped to TodoRecord before leaving this module
    - delete() reports affected row count; the caller decides what zero means

Design Decisions:
    - Session-scoped: one repository per request session, identity map makes
      the toggle read and write hit the same row object
"""

from datetime import timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import TodoId, TodoRecord
from todo_app.models.todo import Todo


def to_record(row: Todo) -> TodoRecord:
    """Map an ORM row to the domain record."""
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops the offset; values are always written in UTC
        created_at = created_at.replace(tzinfo=timezone.utc)
    return TodoRecord(
        id=TodoId(row.id),
        title=row.title,
        completed=row.completed,
        created_at=created_at,
    )


class SqlTodoRepository:
    """Todo persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_newest_first(self) -> list[TodoRecord]:
        result = await self.db.execute(
            select(Todo).order_by(Todo.created_at.desc()),
        )
        return [to_record(row) for row in result.scalars().all()]

    async def add(self, title: str) -> TodoRecord:
        row = Todo(title=title)
        self.db.add(row)
        await self.db.commit()
        return to_record(row)

    async def get(self, todo_id: TodoId) -> TodoRecord | None:
        row = await self.db.get(Todo, todo_id)
        return to_record(row) if row else None

    async def set_completed(
        self, todo_id: TodoId, completed: bool,
    ) -> TodoRecord | None:
        row = await self.db.get(Todo, todo_id)
        if row is None:
            return None
        row.completed = completed
        await self.db.commit()
        return to_record(row)

    async def delete(self, todo_id: TodoId) -> int:
        result = await self.db.execute(delete(Todo).where(Todo.id == todo_id))
        await self.db.commit()
        return result.rowcount
