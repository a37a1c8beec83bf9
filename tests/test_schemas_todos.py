"""
test_schemas_todos.py — Tests for todoapi/schemas/todos.py and errors.py

Called by: pytest
Depends on: todoapi/schemas/
"""

import pytest
from pydantic import ValidationError

from todoapi.schemas.errors import ErrorResponse
from todoapi.schemas.todos import Todo, TodoUpdate


class TestTodo:
    def test_defaults(self):
        t = Todo(id="1")
        assert t.title == "" and t.done is False and t.detail == ""

    def test_json_field_names(self):
        t = Todo(id="1", title="a", done=True, detail="b")
        assert t.model_dump() == {"id": "1", "title": "a", "done": True, "detail": "b"}

    def test_id_required(self):
        with pytest.raises(ValidationError):
            Todo(title="x")

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Todo(id="")

    def test_id_not_stripped(self):
        assert Todo(id=" 1 ").id == " 1 "

    def test_strict_types(self):
        with pytest.raises(ValidationError):
            Todo(id=1)
        with pytest.raises(ValidationError):
            Todo(id="1", done="true")


class TestTodoUpdate:
    def test_all_optional(self):
        u = TodoUpdate()
        assert u.id is None and u.done is False

    def test_with_id_overrides_body_id(self):
        u = TodoUpdate(id="ignored", title="t", done=True, detail="d")
        assert u.with_id("7") == Todo(id="7", title="t", done=True, detail="d")


class TestErrorResponse:
    def test_plain_error_omits_detail(self):
        body = ErrorResponse(error="Todo not found").model_dump(exclude_none=True)
        assert body == {"error": "Todo not found"}
