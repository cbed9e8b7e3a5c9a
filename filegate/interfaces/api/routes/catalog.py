"""Endpoints for subscribers: browsing the catalog and downloading files."""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from filegate.application.use_cases.catalog import list_categories as list_categories_uc
from filegate.application.use_cases.downloads import resolve_download
from filegate.domain.entities import User
from filegate.domain.exceptions import FileGateError
from filegate.infrastructure.database import get_db
from filegate.infrastructure.storage import LocalFileStorage
from filegate.interfaces.api.dependencies import get_current_user, get_storage
from filegate.interfaces.api.routes_helpers import to_http_exception
from filegate.interfaces.api.schemas import CategoryListResponse, CategoryRead

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=CategoryListResponse)
def list_categories(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> CategoryListResponse:
    """List every category with its files. Visible without a subscription."""

    categories = list_categories_uc(db)
    return CategoryListResponse(
        categories=[CategoryRead.from_entity(category) for category in categories]
    )


@router.get("/download/{file_id}")
def download_file(
    file_id: str,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
) -> FileResponse:
    """Stream a file to a user holding an active subscription."""

    try:
        path, filename = resolve_download(
            db, storage, file_id=file_id, requester=current_user
        )
    except FileGateError as exc:
        raise to_http_exception(exc) from exc

    return FileResponse(path, filename=filename, media_type="application/octet-stream")


__all__ = ["router"]
