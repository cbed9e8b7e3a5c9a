from fastapi import FastAPI

from .admin import UPLOAD_PATH
from .admin import router as admin_router
from .auth import router as auth_router
from .catalog import router as catalog_router
from .health import router as health_router


def register_routes(app: FastAPI, prefix: str = "") -> None:
    """Register every API router under ``prefix``."""

    app.include_router(auth_router, prefix=prefix)
    app.include_router(catalog_router, prefix=prefix)
    app.include_router(admin_router, prefix=prefix)
    app.include_router(health_router, prefix=prefix)


__all__ = ["UPLOAD_PATH", "register_routes"]
