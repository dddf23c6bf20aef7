"""Todo List View — cache-and-invalidate behaviour against the real app.

Invariants:
    - load() fills the cache and clears is_loading
    - Every successful mutation is followed by a full re-fetch
    - add() trims, ignores empty titles, clears the input only on success
    - Only one add in flight at a time
    - Failed mutations leave cache and input untouched
"""

import asyncio
from uuid import uuid4

import httpx
import pytest

from todo_app.client.api import TodoApiClient
from todo_app.client.todo_list import TodoListView


@pytest.fixture
def view(client):
    return TodoListView(TodoApiClient(http=client))


async def test_load_empty(view):
    assert view.is_loading is True
    assert await view.load() is True
    assert view.is_loading is False
    assert view.todos == []
    assert "No todos yet. Add one above!" in view.render()


async def test_add_trims_clears_input_and_refetches(view):
    await view.load()
    view.set_title("  Buy milk  ")

    assert await view.add() is True

    assert view.title == ""
    assert [t.title for t in view.todos] == ["Buy milk"]
    assert view.todos[0].completed is False


async def test_add_whitespace_title_sends_nothing(view, client):
    await view.load()
    view.set_title("   ")

    assert await view.add() is False
    assert (await client.get("/todos")).json() == []


async def test_toggle_and_delete_refetch(view):
    await view.load()
    view.set_title("Buy milk")
    await view.add()
    todo_id = str(view.todos[0].id)

    assert await view.toggle(todo_id) is True
    assert view.todos[0].completed is True
    assert "[x] Buy milk" in view.render()

    assert await view.delete(todo_id) is True
    assert view.todos == []


async def test_toggle_unknown_id_keeps_cache(view):
    await view.load()
    view.set_title("Keep me")
    await view.add()
    before = list(view.todos)

    assert await view.toggle(str(uuid4())) is False
    assert view.todos == before


async def test_cache_is_not_patched_locally(view, client):
    await view.load()
    await client.post("/todos", json={"title": "Created elsewhere"})

    assert view.todos == []
    await view.refetch()
    assert [t.title for t in view.todos] == ["Created elsewhere"]


def _mock_api(handler):
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://test",
    )
    return TodoApiClient(http=http)


async def test_failed_add_keeps_input_and_skips_refetch():
    requests = []

    def handler(request):
        requests.append((request.method, request.url.path))
        if request.method == "POST":
            return httpx.Response(500, json={"error": {"code": "INTERNAL_ERROR"}})
        return httpx.Response(200, json=[])

    view = TodoListView(_mock_api(handler))
    await view.load()
    view.set_title("Buy milk")

    assert await view.add() is False

    assert view.title == "Buy milk"
    assert view.is_adding is False
    assert requests == [("GET", "/todos"), ("POST", "/todos")]


async def test_failed_load_stays_loading():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    view = TodoListView(_mock_api(handler))

    assert await view.load() is False
    assert view.is_loading is True
    assert view.render().endswith("Loading...")


async def test_single_create_in_flight():
    release = asyncio.Event()
    posts = []

    async def handler(request):
        if request.method == "POST":
            posts.append(request.content)
            await release.wait()
            return httpx.Response(201, json={
                "id": str(uuid4()), "title": "Buy milk", "completed": False,
                "createdAt": "2026-10-19T12:00:00Z",
            })
        return httpx.Response(200, json=[])

    view = TodoListView(_mock_api(handler))
    view.set_title("Buy milk")

    first = asyncio.create_task(view.add())
    await asyncio.sleep(0)
    while not posts:
        await asyncio.sleep(0)
    assert view.is_adding is True
    assert await view.add() is False

    release.set()
    assert await first is True
    assert len(posts) == 1
    assert view.is_adding is False
