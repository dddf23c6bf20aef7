"""Boundary Protocols — contract between the todo service and its store.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via explicit construction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from todo_app.core.domain_types import TodoId, TodoRecord


class TodoRepository(Protocol):
    """Contract for todo persistence — implemented by shell."""
    async def list_newest_first(self) -> list[TodoRecord]: ...
    async def add(self, title: str) -> TodoRecord: ...
    async def get(self, todo_id: TodoId) -> TodoRecord | None: ...
    async def set_completed(
        self, todo_id: TodoId, completed: bool,
    ) -> TodoRecord | None: ...
    async def delete(self, todo_id: TodoId) -> int: ...
