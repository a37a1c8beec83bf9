"""Todos API — list, fetch, create, update and delete todo items."""

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_store
from ..schemas.errors import ErrorResponse
from ..schemas.todos import Todo, TodoUpdate
from ..services.todo_store import TodoStore

router = APIRouter(prefix="/todos", tags=["todos"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Todo not found"}}
_BAD_BODY = {400: {"model": ErrorResponse, "description": "Malformed request body"}}


@router.get("", response_model=list[Todo], summary="Get all todos")
def list_todos(store: TodoStore = Depends(get_store)):
    """Get a list of all todo items."""
    return store.list_todos()


@router.get(
    "/{todo_id}",
    response_model=Todo,
    summary="Get a single todo",
    responses=_NOT_FOUND,
)
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    """Get a todo item by ID."""
    return store.get_todo(todo_id)


@router.post(
    "",
    response_model=str,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new todo",
    responses={
        **_BAD_BODY,
        409: {"model": ErrorResponse, "description": "Todo ID already exists"},
    },
)
def create_todo(body: Todo, store: TodoStore = Depends(get_store)):
    """Create a new todo item from JSON body. Returns the new todo's ID."""
    return store.create_todo(body).id


@router.put(
    "/{todo_id}",
    response_model=Todo,
    summary="Update a todo",
    responses={**_BAD_BODY, **_NOT_FOUND},
)
def update_todo(todo_id: str, body: TodoUpdate, store: TodoStore = Depends(get_store)):
    """Update an existing todo item by ID. Any id in the body is ignored."""
    return store.update_todo(todo_id, body)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a todo",
    responses=_NOT_FOUND,
)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    """Delete a todo item by ID."""
    store.delete_todo(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
