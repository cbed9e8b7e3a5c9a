"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from filegate.config import get_settings
from filegate.domain.exceptions import FileGateError
from filegate.infrastructure.database import engine, initialize_database
from filegate.interfaces.api.middleware import UploadSizeLimitMiddleware
from filegate.interfaces.api.routes import UPLOAD_PATH, register_routes
from filegate.interfaces.api.routes_helpers import status_code_for

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and first-run records on startup, release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def _envelope(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _envelope(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        return _envelope(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.exception_handler(FileGateError)
    async def filegate_error_handler(_: Request, exc: FileGateError) -> JSONResponse:
        return _envelope(status_code_for(exc), exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Database error while handling %s %s", request.method, request.url.path)
        return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.getLogger("filegate").setLevel(settings.log_level.upper())

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        UploadSizeLimitMiddleware,
        upload_path=f"{settings.api_prefix}{UPLOAD_PATH}",
        max_bytes=settings.max_upload_bytes,
    )
    # Wildcard origins cannot be combined with credentials.
    allow_all = "*" in settings.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app, settings.api_prefix)
    return app


app = create_app()
