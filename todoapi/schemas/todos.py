"""
schemas/todos.py — Pydantic models for the Todo resource

Business Rules:
- JSON field names are exactly id, title, done, detail
- id is required and non-empty on create; it is matched case-sensitively
- title, done and detail default to "", false, "" when omitted
- Types are strict: a number for id or a string for done is rejected
- On update any id in the body is ignored; the path id wins

Called by: routers/todos.py, services/todo_store.py
Depends on: pydantic
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Todo(BaseModel):
    """A todo item, as stored and as sent by clients on create."""

    model_config = ConfigDict(strict=True)

    id: str = Field(..., examples=["1"])
    title: str = Field("", examples=["Buy groceries"])
    done: bool = False
    detail: str = Field("", examples=["Milk, Bread, Eggs"])

    @field_validator("id")
    @classmethod
    def id_required(cls, v: str) -> str:
        if not v:
            raise ValueError("id required")
        return v


class TodoUpdate(BaseModel):
    """Body of PUT /todos/{id}. A body id is accepted and discarded."""

    model_config = ConfigDict(strict=True)

    id: str | None = None
    title: str = ""
    done: bool = False
    detail: str = ""

    def with_id(self, todo_id: str) -> Todo:
        return Todo(id=todo_id, title=self.title, done=self.done, detail=self.detail)
