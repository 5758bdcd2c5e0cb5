"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Domain exceptions are translated to HTTP here; handlers and services never
import FastAPI.
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from roomchat import __version__
from roomchat.config.logging_config import correlation_id_var, setup_logging
from roomchat.config.settings import Config
from roomchat.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidOperationError,
)
from roomchat.infrastructure.persistence import create_schema
from roomchat.presentation.api import auth_router, conversations_router, messages_router
from roomchat.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: create tables when DATABASE_AUTO_CREATE is on
    - Shutdown: close the DI container (disposes the engine)
    """
    container: AsyncContainer = app.state.dishka_container
    if Config.DATABASE_AUTO_CREATE:
        engine = await container.get(AsyncEngine)
        await create_schema(engine)
        logger.info("Database schema ready.")
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def _message(exc: Exception) -> dict:
    return {"message": str(exc)}


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "message": "Validation failed",
                "errors": [{"field": exc.field, "message": exc.message}],
            },
        )

    # Request-schema failures share the domain validation body
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "")}
            for error in exc.errors()
        ]
        logger.info(f"[validation] {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"message": "Validation failed", "errors": errors},
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=_message(exc))

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=_message(exc))

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_message(exc))

    @app.exception_handler(InvalidOperationError)
    async def invalid_operation_handler(request: Request, exc: InvalidOperationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(
            f"[error] Unhandled {type(exc).__name__} on {request.method} {request.url.path}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; one is built from Config when omitted

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Roomchat API",
        description="Multi-room chat backend with conversations and threaded replies",
        version=__version__,
        lifespan=lifespan,
    )

    # Dishka adds middleware, so this must run before the app starts
    setup_dishka(container or create_container(), app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials="*" not in Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Roomchat API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(conversations_router)
    app.include_router(messages_router)

    return app


# Create the app instance
app = create_fastapi_app()
