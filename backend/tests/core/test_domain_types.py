"""Domain Types — TodoRecord immutability, toggling, and id parsing.

Tests:
    - toggled() inverts completed and leaves every other field alone
    - Two toggles return the original record
    - parse_todo_id accepts UUID strings and rejects everything else
"""

import dataclasses
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from todo_app.core.domain_types import TodoId, TodoRecord, parse_todo_id


def _record(completed=False):
    return TodoRecord(
        id=TodoId(uuid4()),
        title="Buy milk",
        completed=completed,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


def test_toggled_inverts_completed_only():
    record = _record()
    flipped = record.toggled()
    assert flipped.completed is True
    assert (flipped.id, flipped.title, flipped.created_at) == (
        record.id, record.title, record.created_at,
    )


def test_double_toggle_restores_original():
    record = _record(completed=True)
    assert record.toggled().toggled() == record


def test_record_is_frozen():
    record = _record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.completed = True


def test_parse_todo_id_accepts_uuid_string():
    uid = uuid4()
    assert parse_todo_id(str(uid)) == uid


@pytest.mark.parametrize("raw", ["", "42", "not-a-uuid", None])
def test_parse_todo_id_rejects_malformed(raw):
    assert parse_todo_id(raw) is None
