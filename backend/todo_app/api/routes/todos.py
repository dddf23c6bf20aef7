"""Todo Routes — the four CRUD endpoints.

Invariants:
    - GET    /todos       → 200, newest first
    - POST   /todos       → 201, created todo; 400 on malformed body
    - PATCH  /todos/{id}  → 200, toggled todo; 404 on unknown id
    - DELETE /todos/{id}  → 204, no body; 404 on unknown id

Design Decisions:
    - Path id typed as str: the service owns id parsing so malformed and
      unknown ids both answer 404
    - get_todo_service builds the service per request from the request session
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.infrastructure.database import get_db
from todo_app.infrastructure.todo_store import SqlTodoRepository
from todo_app.schemas.todo import TodoCreate, TodoResponse
from todo_app.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])


def get_todo_service(db: AsyncSession = Depends(get_db)) -> TodoService:
    return TodoService(SqlTodoRepository(db))


@router.get("", response_model=list[TodoResponse])
async def list_todos(service: TodoService = Depends(get_todo_service)):
    """List all todos, newest first."""
    return [TodoResponse.from_record(r) for r in await service.list_todos()]


@router.post(
    "", response_model=TodoResponse, status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate, service: TodoService = Depends(get_todo_service),
):
    """Create a todo."""
    return TodoResponse.from_record(await service.create(body.title))


@router.patch("/{todo_id}", response_model=TodoResponse)
async def toggle_todo(
    todo_id: str, service: TodoService = Depends(get_todo_service),
):
    """Flip a todo's completed flag."""
    return TodoResponse.from_record(await service.toggle_complete(todo_id))


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: str, service: TodoService = Depends(get_todo_service),
):
    """Delete a todo permanently."""
    await service.remove(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
