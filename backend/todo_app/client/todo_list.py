"""Todo List View — cache-and-invalidate state for the client.

Invariants:
    - The cached list is only ever replaced by a full re-fetch (no local patching)
    - A re-fetch follows every successful mutation, never a failed one
    - At most one create in flight; extra add() calls while busy are ignored
    - The title input is cleared only after a successful create
    - Failures leave the cache as it was; nothing is retried

Design Decisions:
    - HTTP failures are logged and reported through the bool return value:
      the view itself has no error state, a stale list is the only signal
"""

import logging

import httpx

from todo_app.client.api import TodoApiClient
from todo_app.schemas.todo import TodoResponse

logger = logging.getLogger(__name__)


class TodoListView:
    """Local copy of the todo list plus the pending title input."""

    def __init__(self, api: TodoApiClient):
        self.api = api
        self.todos: list[TodoResponse] = []
        self.title = ""
        self.is_loading = True
        self.is_adding = False

    async def load(self) -> bool:
        """Initial fetch; is_loading stays true until it succeeds."""
        ok = await self.refetch()
        if ok:
            self.is_loading = False
        return ok

    async def refetch(self) -> bool:
        try:
            todos = await self.api.list_todos()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch todos: {e}")
            return False
        self.todos = todos
        self.is_loading = False
        return True

    def set_title(self, title: str) -> None:
        self.title = title

    async def add(self) -> bool:
        """Create a todo from the pending title."""
        trimmed = self.title.strip()
        if not trimmed or self.is_adding:
            return False
        self.is_adding = True
        try:
            await self.api.create_todo(trimmed)
        except httpx.HTTPError as e:
            logger.warning(f"Failed to create todo: {e}")
            return False
        finally:
            self.is_adding = False
        self.title = ""
        await self.refetch()
        return True

    async def toggle(self, todo_id: str) -> bool:
        try:
            await self.api.toggle_todo(todo_id)
        except httpx.HTTPError as e:
            logger.warning(f"Failed to toggle todo {todo_id}: {e}")
            return False
        await self.refetch()
        return True

    async def delete(self, todo_id: str) -> bool:
        try:
            await self.api.delete_todo(todo_id)
        except httpx.HTTPError as e:
            logger.warning(f"Failed to delete todo {todo_id}: {e}")
            return False
        await self.refetch()
        return True

    def render(self) -> str:
        """Plain-text rendering of the current state."""
        lines = ["TODO List", ""]
        if self.is_loading:
            lines.append("Loading...")
        elif not self.todos:
            lines.append("No todos yet. Add one above!")
        else:
            for todo in self.todos:
                mark = "x" if todo.completed else " "
                lines.append(f"[{mark}] {todo.title}  ({todo.id})")
        return "\n".join(lines)
