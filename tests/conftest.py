"""
conftest.py — Shared Test Fixtures for the Todo API

Provides a fresh, empty TodoStore per test and a FastAPI TestClient
wired to it.

Business Rules:
- Sample data seeding is off so every test starts from an empty store
- The store dependency is overridden, so tests can inspect it directly

Called by: all test files via pytest autodiscovery
Depends on: todoapi.main (app), todoapi.dependencies (get_store)
"""

import os
os.environ["SEED_SAMPLE_DATA"] = "false"  # Must be set before importing todoapi modules

import pytest
from fastapi.testclient import TestClient

from todoapi.schemas.todos import Todo
from todoapi.services.todo_store import TodoStore


@pytest.fixture()
def store() -> TodoStore:
    """An empty store."""
    return TodoStore()


@pytest.fixture()
def groceries() -> Todo:
    return Todo(id="1", title="Buy groceries", done=False, detail="Milk, Bread, Eggs")


@pytest.fixture()
def client(store: TodoStore) -> TestClient:
    """TestClient whose requests all hit the `store` fixture."""
    from todoapi.dependencies import get_store
    from todoapi.main import app

    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
