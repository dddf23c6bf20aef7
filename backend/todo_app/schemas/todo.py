"""Todo Schemas — Pydantic models for the /todos endpoints.

Invariants:
    - TodoCreate.title: stripped, 1-500 chars, never whitespace-only
    - TodoResponse serializes created_at as `createdAt` (ISO-8601)

Design Decisions:
    - alias + populate_by_name: the same model parses client responses and
      builds server responses from TodoRecord attributes
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_app.core.domain_types import TodoRecord

TITLE_MAX_LENGTH = 500


class TodoCreate(BaseModel):
    """Todo creation — title must be non-empty after trimming."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TodoResponse(BaseModel):
    """Public todo representation."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    completed: bool
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: TodoRecord) -> "TodoResponse":
        return cls(
            id=record.id,
            title=record.title,
            completed=record.completed,
            created_at=record.created_at,
        )
