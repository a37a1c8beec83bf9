"""
Todo API — in-memory CRUD service for todo items.

App wiring lives here: lifespan, middleware, exception handlers,
health check. Routes live in routers/, logic in services/.
"""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import APP_VERSION, settings
from .dependencies import get_store
from .logging_config import setup_logging
from .routers import todos
from .schemas.errors import ErrorResponse
from .services.todo_store import TodoError, TodoStore, sample_todos


# ── App Lifecycle ─────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)
    store = TodoStore()
    if settings.seed_sample_data:
        count = store.seed(sample_todos())
        logger.info("Seeded {} sample todos", count)
    app.state.store = store
    logger.info("{} {} ready", settings.app_name, APP_VERSION)
    yield
    logger.info("{} shutting down", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=APP_VERSION,
    description="This is a simple Todo API server.",
    docs_url="/swagger",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.include_router(todos.router)


# ── Middleware ────────────────────────────────────────────────────────


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Tag each request with a short ID, time it, and log the outcome.

    Unhandled errors become a 500 here, so error responses carry the same headers.
    """
    request_id = uuid.uuid4().hex[:8]
    start = time.perf_counter()
    with logger.contextualize(request_id=request_id):
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.opt(exception=exc).error(
                "Unhandled error on {} {}", request.method, request.url.path
            )
            response = _error(500, "Internal server error")
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "{} {} -> {} ({:.1f}ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
    response.headers["X-Request-ID"] = request_id
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


# ── Exception Handlers ────────────────────────────────────────────────


def _error(
    status_code: int, error: str, detail: list | None = None, headers: dict | None = None
) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers
    )


@app.exception_handler(TodoError)
async def todo_error_handler(request: Request, exc: TodoError):
    return _error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in exc.errors()
    ]
    logger.debug("Rejected {} {}: {}", request.method, request.url.path, errors)
    return _error(400, "Invalid request body", errors)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    return _error(500, "Internal server error")


# ── Health ────────────────────────────────────────────────────────────


@app.get("/health")
def health(store: TodoStore = Depends(get_store)):
    return {"status": "ok", "version": APP_VERSION, "todos": len(store)}
