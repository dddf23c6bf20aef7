"""Todo Service — list, create, toggle and delete against a TodoRepository.

Invariants:
    - toggle_complete and remove on an unknown id raise ResourceNotFoundError
    - toggle always inverts the stored value; it never sets an absolute one
    - list_todos on an empty store returns [] (not an error)
    - Infrastructure errors are not caught here

Design Decisions:
    - Repository passed at construction: no injection container, the API layer
      builds one service per request session
    - Toggle is read-then-write without a lock: two racing toggles can lose an
      update, accepted for a single-user list
    - A malformed id can never match a row, so it is reported as not found
      instead of as a validation error
"""

import logging

from todo_app.core.domain_types import TodoId, TodoRecord, parse_todo_id
from todo_app.core.errors import ResourceNotFoundError
from todo_app.core.repository_protocols import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """CRUD operations over the todo store."""

    def __init__(self, repository: TodoRepository):
        self.repository = repository

    async def list_todos(self) -> list[TodoRecord]:
        return await self.repository.list_newest_first()

    async def create(self, title: str) -> TodoRecord:
        record = await self.repository.add(title)
        logger.info("Todo created", extra={"todo_id": str(record.id)})
        return record

    async def toggle_complete(self, todo_id: str) -> TodoRecord:
        """Flip `completed` on an existing todo and return the updated record."""
        key = self._require_id(todo_id)
        current = await self.repository.get(key)
        if current is None:
            raise ResourceNotFoundError("Todo", todo_id)
        updated = await self.repository.set_completed(key, not current.completed)
        if updated is None:
            # deleted between the read and the write
            raise ResourceNotFoundError("Todo", todo_id)
        logger.info(
            f"Todo completed={updated.completed}",
            extra={"todo_id": todo_id},
        )
        return updated

    async def remove(self, todo_id: str) -> None:
        key = self._require_id(todo_id)
        affected = await self.repository.delete(key)
        if affected == 0:
            raise ResourceNotFoundError("Todo", todo_id)
        logger.info("Todo deleted", extra={"todo_id": todo_id})

    @staticmethod
    def _require_id(todo_id: str) -> TodoId:
        key = parse_todo_id(todo_id)
        if key is None:
            raise ResourceNotFoundError("Todo", todo_id)
        return key
