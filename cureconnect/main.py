"""CureConnect Backend - FastAPI Application."""

import time
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from cureconnect import __version__
from cureconnect.boot import Bootloader, BootMode
from cureconnect.config import settings
from cureconnect.database import dispose_engine, init_db
from cureconnect.deps import DbSession
from cureconnect.logger import configure_logging, get_logger
from cureconnect.routers import auth, profile, reference

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate config and DB before serving; release the pool on shutdown."""
    configure_logging()
    # Will sys.exit(1) if critical checks fail
    await Bootloader.validate(mode=BootMode.CRITICAL)

    await init_db()
    logger.info("Application started", version=__version__, port=settings.port)
    yield
    await dispose_engine()
    logger.info("Application shutting down")


app = FastAPI(
    title="CureConnect API",
    description="User accounts, session log and disease reference data",
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next: Any) -> Response:
    """Bind a request id to every log line and echo it back to the caller."""
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, method=request.method, path=request.url.path)

    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request crashed", elapsed_ms=round((time.perf_counter() - started) * 1000, 2))
        raise

    logger.info(
        "Request served",
        status_code=response.status_code,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or incomplete bodies as 400, not FastAPI's 422."""
    logger.info("Request validation failed", errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Opaque JSON 500; the message and traceback are only exposed with DEBUG on."""
    logger.error("Unhandled exception", error=str(exc), error_type=type(exc).__name__)
    content: dict[str, Any] = {
        "detail": str(exc) if settings.debug else "An internal server error occurred. Please try again later.",
        "trace": traceback.format_exc() if settings.debug else None,
        "request_id": structlog.contextvars.get_contextvars().get("request_id"),
    }
    return JSONResponse(status_code=500, content=content)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    # Credentials cannot be combined with a wildcard origin
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)

app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(reference.router)


@app.get("/health")
async def health_check(db: DbSession) -> Response:
    """Return 200 when the database answers through the pool, 503 otherwise."""
    try:
        await db.execute(text("SELECT 1"))
        healthy = True
    except Exception as e:
        logger.error("Health check: database unavailable", error=str(e), error_type=type(e).__name__)
        healthy = False

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(UTC).isoformat(),
            "checks": {"database": healthy},
            "version": __version__,
        },
    )
