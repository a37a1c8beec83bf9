"""Todo store — the authoritative in-memory collection of todo items.

Records are kept in an insertion-ordered dict keyed by id. A single lock
serializes every operation, so concurrent requests never lose updates or
race two creates of the same id.

Usage:
    store = TodoStore()
    store.create_todo(Todo(id="1", title="Buy groceries"))
    store.get_todo("1")
    store.update_todo("1", TodoUpdate(title="Buy groceries", done=True))
    store.delete_todo("1")
"""

import threading
from collections.abc import Iterable

from loguru import logger

from ..schemas.todos import Todo, TodoUpdate

SAMPLE_TODOS = (
    {"id": "1", "title": "Buy groceries", "done": False, "detail": "Milk, Bread, Eggs"},
    {"id": "2", "title": "Read book", "done": True, "detail": "The Go Programming Language"},
    {"id": "3", "title": "Exercise", "done": False, "detail": "30 minutes of running"},
)


# ── Errors ───────────────────────────────────────────────────────────


class TodoError(Exception):
    """Base for store errors. Carries the HTTP status the boundary returns."""

    status_code = 500
    message = "Todo error"

    def __init__(self, message: str | None = None, todo_id: str | None = None):
        self.message = message or self.message
        self.todo_id = todo_id
        super().__init__(self.message)


class NotFound(TodoError):
    status_code = 404
    message = "Todo not found"


class Conflict(TodoError):
    status_code = 409
    message = "Todo already exists"


class InvalidInput(TodoError):
    status_code = 400
    message = "Invalid todo"


# ── Store ────────────────────────────────────────────────────────────


class TodoStore:
    def __init__(self):
        self._todos: dict[str, Todo] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list_todos(self) -> list[Todo]:
        """Return every todo in insertion order."""
        with self._lock:
            return [t.model_copy() for t in self._todos.values()]

    def get_todo(self, todo_id: str) -> Todo:
        with self._lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                logger.debug("Todo {} not found", todo_id)
                raise NotFound(todo_id=todo_id)
            return todo.model_copy()

    def create_todo(self, todo: Todo) -> Todo:
        """Insert a new todo. Raises InvalidInput on an empty id, Conflict on a taken one.

        Over HTTP the Todo schema already rejects an empty id with a 400, so the
        InvalidInput guard only matters to direct callers.
        """
        if not todo.id:
            raise InvalidInput("id required")
        with self._lock:
            if todo.id in self._todos:
                logger.debug("Todo {} already exists", todo.id)
                raise Conflict(todo_id=todo.id)
            stored = todo.model_copy()
            self._todos[stored.id] = stored
        logger.info("Todo {} created", stored.id)
        return stored.model_copy()

    def update_todo(self, todo_id: str, patch: TodoUpdate) -> Todo:
        """Replace title, done and detail of an existing todo. The stored id never changes."""
        with self._lock:
            if todo_id not in self._todos:
                logger.debug("Todo {} not found for update", todo_id)
                raise NotFound(todo_id=todo_id)
            updated = patch.with_id(todo_id)
            # Reassigning an existing key keeps its insertion position
            self._todos[todo_id] = updated
        logger.info("Todo {} updated", todo_id)
        return updated.model_copy()

    def delete_todo(self, todo_id: str) -> None:
        with self._lock:
            if self._todos.pop(todo_id, None) is None:
                logger.debug("Todo {} not found for delete", todo_id)
                raise NotFound(todo_id=todo_id)
        logger.info("Todo {} deleted", todo_id)

    def seed(self, todos: Iterable[Todo]) -> int:
        """Create each todo in order; returns how many were added."""
        count = 0
        for todo in todos:
            self.create_todo(todo)
            count += 1
        return count


def sample_todos() -> list[Todo]:
    return [Todo(**t) for t in SAMPLE_TODOS]
