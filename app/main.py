"""
Institution Content Service - FastAPI Application Entry Point.

Serves institution, program-section and banner content to the frontend.
"""
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.health import router as health_router
from app.api.institutions import router as institutions_router
from app.api.program_sections import router as program_sections_router
from app.core.config import get_settings
from app.core.logging import get_safe_logger, setup_logging
from app.schemas.response import ErrorDetail, ErrorResponse, ResponseMetadata
from app.services.exceptions import ContentError
from app.services.permissions import (
    InMemoryPermissionStore,
    PermissionStore,
    ensure_public_read,
)
from app.services.repository import ContentRepository

SERVICE_VERSION = "0.1.0"

# Initialize logging first
setup_logging()
logger = get_safe_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Grants public read permissions before the first request is served.
    """
    settings = get_settings()
    logger.info("Starting Institution Content Service")

    # Fatal on failure: never serve with a partial permission state
    await ensure_public_read(
        app.state.permission_store,
        settings.public_read_collections,
    )

    yield

    logger.info("Shutting down Institution Content Service")


def create_app(
    repository: Optional[ContentRepository] = None,
    permission_store: Optional[PermissionStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Institution Content Service",
        description="Institution, program and banner content API",
        version=SERVICE_VERSION,
        docs_url="/docs" if settings.service_env == "dev" else None,
        redoc_url="/redoc" if settings.service_env == "dev" else None,
        openapi_url="/openapi.json" if settings.service_env == "dev" else None,
        lifespan=lifespan
    )

    app.state.repository = repository or ContentRepository()
    app.state.permission_store = permission_store or InMemoryPermissionStore()

    # Register routes
    app.include_router(health_router)
    app.include_router(institutions_router)
    app.include_router(program_sections_router)

    # Register exception handlers
    app.add_exception_handler(ContentError, content_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app


def _request_id(request: Request) -> str:
    return request.headers.get("X-Request-ID", str(uuid.uuid4()))


def _error_response(status_code: int, code: str, message: str, request_id: str) -> JSONResponse:
    error_response = ErrorResponse(
        success=False,
        error=ErrorDetail(code=code, message=message),
        metadata=ResponseMetadata(requestId=request_id)
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(by_alias=True)
    )


async def content_exception_handler(
    request: Request,
    exc: ContentError
) -> JSONResponse:
    """
    Handle validation, schema and not-found errors.
    Validation messages are returned to the caller but not logged.
    """
    request_id = _request_id(request)
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Content error",
        error_code=exc.error_code.value,
        request_id=request_id,
        status_code=exc.status_code
    )
    return _error_response(exc.status_code, exc.error_code.value, exc.message, request_id)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI parameter validation errors."""
    request_id = _request_id(request)
    logger.warning(
        "Request validation failed",
        error_code="BAD_REQUEST",
        request_id=request_id,
        status_code=400
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", "Invalid request format", request_id
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle HTTP exceptions (auth and permission errors)."""
    request_id = _request_id(request)

    # Map status codes to error codes
    if exc.status_code == 401:
        error_code = "UNAUTHORIZED"
    elif exc.status_code == 403:
        error_code = "FORBIDDEN"
    elif exc.status_code == 404:
        error_code = "NOT_FOUND"
    elif exc.status_code < 500:
        error_code = "BAD_REQUEST"
    else:
        error_code = "INTERNAL_ERROR"

    logger.warning(
        "HTTP exception",
        error_code=error_code,
        request_id=request_id,
        status_code=exc.status_code
    )

    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(exc.status_code, error_code, message, request_id)


async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    Only the exception class is logged.
    """
    request_id = _request_id(request)
    logger.error(
        "Unexpected error",
        error_code="INTERNAL_ERROR",
        request_id=request_id,
        status_code=500,
        exception_class=type(exc).__name__
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "Internal server error",
        request_id
    )


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.service_env == "dev"
    )
