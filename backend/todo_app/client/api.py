"""Todo API Client — thin async wrapper over the four REST endpoints.

Invariants:
    - One base URL, fixed timeout, JSON content type on every request
    - Non-2xx responses raise httpx.HTTPStatusError (no retries)
    - Responses parsed into TodoResponse, the same schema the server emits
"""

from __future__ import annotations

import httpx

from todo_app.client.config import ClientSettings, get_client_settings
from todo_app.schemas.todo import TodoResponse


class TodoApiClient:
    """HTTP consumer of the todo API."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        settings = settings or get_client_settings()
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            base_url=settings.api_url,
            timeout=settings.api_timeout_seconds,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> TodoApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def list_todos(self) -> list[TodoResponse]:
        res = await self._http.get("/todos")
        res.raise_for_status()
        return [TodoResponse.model_validate(item) for item in res.json()]

    async def create_todo(self, title: str) -> TodoResponse:
        res = await self._http.post("/todos", json={"title": title})
        res.raise_for_status()
        return TodoResponse.model_validate(res.json())

    async def toggle_todo(self, todo_id: str) -> TodoResponse:
        res = await self._http.patch(f"/todos/{todo_id}")
        res.raise_for_status()
        return TodoResponse.model_validate(res.json())

    async def delete_todo(self, todo_id: str) -> None:
        res = await self._http.delete(f"/todos/{todo_id}")
        res.raise_for_status()
