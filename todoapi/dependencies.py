"""
dependencies.py — Shared FastAPI Dependencies

Called by: routers/todos.py
Depends on: services/todo_store.py (the store lives on app.state)
"""

from fastapi import Request

from .services.todo_store import TodoStore


def get_store(request: Request) -> TodoStore:
    """Dependency: the application's single TodoStore, created in the lifespan."""
    return request.app.state.store
