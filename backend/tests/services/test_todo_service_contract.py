"""Todo Service contract — store call pattern, checked with a recording fake repository.

Tests:
    - toggle does one read and one write, and writes the inverted value
    - a row vanishing between read and write surfaces as not found
    - remove maps zero affected rows to ResourceNotFoundError
    - a malformed id never reaches the store
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from todo_app.core.domain_types import TodoId, TodoRecord
from todo_app.core.errors import ResourceNotFoundError
from todo_app.services.todo_service import TodoService


class _FakeRepository:
    def __init__(self, records=None):
        self.records = {r.id: r for r in records or []}
        self.calls = []

    async def list_newest_first(self):
        self.calls.append(("list",))
        return sorted(self.records.values(), key=lambda r: r.created_at, reverse=True)

    async def add(self, title):
        self.calls.append(("add", title))
        record = TodoRecord(
            id=TodoId(uuid4()), title=title, completed=False,
            created_at=datetime.now(timezone.utc),
        )
        self.records[record.id] = record
        return record

    async def get(self, todo_id):
        self.calls.append(("get", todo_id))
        return self.records.get(todo_id)

    async def set_completed(self, todo_id, completed):
        self.calls.append(("set_completed", todo_id, completed))
        record = self.records.get(todo_id)
        if record is None:
            return None
        record = TodoRecord(record.id, record.title, completed, record.created_at)
        self.records[todo_id] = record
        return record

    async def delete(self, todo_id):
        self.calls.append(("delete", todo_id))
        return 1 if self.records.pop(todo_id, None) else 0


def _record(completed=False):
    return TodoRecord(
        id=TodoId(uuid4()), title="Write report", completed=completed,
        created_at=datetime(2026, 5, 1, tzinfo=timezone.utc),
    )


async def test_toggle_reads_once_then_writes_inverse():
    record = _record(completed=True)
    repo = _FakeRepository([record])

    updated = await TodoService(repo).toggle_complete(str(record.id))

    assert updated.completed is False
    assert repo.calls == [
        ("get", record.id), ("set_completed", record.id, False),
    ]


async def test_toggle_row_deleted_between_read_and_write():
    record = _record()
    repo = _FakeRepository([record])

    async def vanish(todo_id, completed):
        return None

    repo.set_completed = vanish
    with pytest.raises(ResourceNotFoundError):
        await TodoService(repo).toggle_complete(str(record.id))


async def test_remove_zero_rows_is_not_found():
    repo = _FakeRepository()
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await TodoService(repo).remove(str(uuid4()))
    assert exc_info.value.http_status == 404


async def test_malformed_id_never_reaches_store():
    repo = _FakeRepository()
    service = TodoService(repo)

    with pytest.raises(ResourceNotFoundError):
        await service.toggle_complete("123")
    with pytest.raises(ResourceNotFoundError):
        await service.remove("123")

    assert repo.calls == []


async def test_create_passes_title_through():
    repo = _FakeRepository()

    created = await TodoService(repo).create("Buy milk")

    assert repo.calls == [("add", "Buy milk")]
    assert created.completed is False
