"""
schemas/errors.py — Structured error response model

Shared by every exception handler in main.py. Serialized with
exclude_none so a plain error is just {"error": "..."}.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    detail: list | None = None
