"""Todo API — in-memory CRUD service for todo items."""
