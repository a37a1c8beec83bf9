"""
schemas/ — Pydantic request/response models for the Todo API

Provides input validation, auto-generated OpenAPI docs, and
consistent error payloads across all endpoints.
"""
