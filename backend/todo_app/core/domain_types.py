"""Domain Types — the Todo record and its identity type.

Invariants:
    - TodoId wraps a UUID — never use bare strings as lookup keys in domain logic
    - TodoRecord is immutable; a toggle produces a new record
    - created_at is always timezone-aware (UTC)

Design Decisions:
    - NewType over dataclass wrapper for ids: zero runtime cost, full type-checker support
    - Frozen dataclass for the record: the store maps rows into it, the API
      layer serializes it, nothing mutates it in between
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import NewType
from uuid import UUID


TodoId = NewType("TodoId", UUID)


@dataclass(frozen=True)
class TodoRecord:
    """One persisted task."""
    id: TodoId
    title: str
    completed: bool
    created_at: datetime

    def toggled(self) -> "TodoRecord":
        return replace(self, completed=not self.completed)


def parse_todo_id(raw: str) -> TodoId | None:
    """Parse an external id. Returns None for anything that is not a UUID."""
    try:
        return TodoId(UUID(raw))
    except (ValueError, AttributeError, TypeError):
        return None
