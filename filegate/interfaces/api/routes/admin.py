"""Administrator endpoints: users, subscriptions, catalog and branding."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from filegate.application.use_cases.catalog import (
    create_category as create_category_uc,
    delete_file as delete_file_uc,
    list_categories as list_categories_uc,
)
from filegate.application.use_cases.site_settings import (
    get_site_settings as get_site_settings_uc,
    update_site_settings as update_site_settings_uc,
)
from filegate.application.use_cases.subscriptions import grant_subscription
from filegate.application.use_cases.users import list_users as list_users_uc
from filegate.config import Settings
from filegate.domain.entities import User
from filegate.domain.exceptions import FileGateError
from filegate.infrastructure.database import get_db
from filegate.infrastructure.storage import LocalFileStorage
from filegate.interfaces.api.dependencies import get_app_settings, get_storage, require_admin
from filegate.interfaces.api.multipart_upload import (
    CATEGORY_FIELD,
    MultipartUploadReader,
    read_upload,
)
from filegate.interfaces.api.routes_helpers import to_http_exception
from filegate.interfaces.api.schemas import (
    ApiResponse,
    CategoryCreate,
    CategoryCreateResponse,
    CategoryListResponse,
    CategoryRead,
    FileRead,
    FileUploadResponse,
    SiteSettingsRead,
    SiteSettingsResponse,
    SiteSettingsUpdate,
    SubscriptionGrantRequest,
    SubscriptionGrantResponse,
    SubscriptionRead,
    UserListResponse,
    UserRead,
)

router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)

UPLOAD_ROUTE = "/upload"
UPLOAD_PATH = f"{router.prefix}{UPLOAD_ROUTE}"


@router.get("/users", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserListResponse:
    """List every user, newest first, with the active subscription."""

    users = list_users_uc(db)
    return UserListResponse(
        users=[UserRead.from_entity(user, subscription) for user, subscription in users]
    )


@router.put("/users/{user_id}/subscription", response_model=SubscriptionGrantResponse)
def update_subscription(
    user_id: str,
    payload: SubscriptionGrantRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> SubscriptionGrantResponse:
    """Replace the active subscription of ``user_id`` with a new grant."""

    try:
        subscription = grant_subscription(
            db, user_id=user_id, type=payload.type, days=payload.days
        )
    except FileGateError as exc:
        raise to_http_exception(exc) from exc

    logger.info("Admin %s updated the subscription of %s", current_user.username, user_id)
    return SubscriptionGrantResponse(
        message="Subscription updated successfully",
        subscription=SubscriptionRead.from_entity(subscription),
    )


@router.get("/categories", response_model=CategoryListResponse)
def list_categories(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> CategoryListResponse:
    categories = list_categories_uc(db)
    return CategoryListResponse(
        categories=[CategoryRead.from_entity(category) for category in categories]
    )


@router.post("/categories", response_model=CategoryCreateResponse)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> CategoryCreateResponse:
    try:
        category = create_category_uc(db, payload.name)
    except FileGateError as exc:
        raise to_http_exception(exc) from exc
    return CategoryCreateResponse(
        message="Category created successfully",
        category=CategoryRead.from_entity(category),
    )


@router.post(UPLOAD_ROUTE, response_model=FileUploadResponse)
async def upload_file(
    request: Request,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
    _: User = Depends(require_admin),
) -> FileUploadResponse:
    """Stream an uploaded file into a category.

    The body is only read once the caller is known to be an administrator,
    and reading stops at the first rejected part.
    """

    reader = MultipartUploadReader(
        storage,
        allowed_extensions=settings.allowed_extensions,
        max_bytes=settings.max_upload_bytes,
    )
    try:
        upload = await read_upload(request, reader)
        file_asset = await run_in_threadpool(
            upload.complete, db, reader.fields.get(CATEGORY_FIELD)
        )
    except FileGateError as exc:
        raise to_http_exception(exc) from exc

    return FileUploadResponse(
        message="File uploaded successfully",
        file=FileRead.from_entity(file_asset),
    )


@router.delete("/files/{file_id}", response_model=ApiResponse)
def delete_file(
    file_id: str,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _: User = Depends(require_admin),
) -> ApiResponse:
    try:
        delete_file_uc(db, storage, file_id)
    except FileGateError as exc:
        raise to_http_exception(exc) from exc
    return ApiResponse(message="File deleted successfully")


@router.get("/settings", response_model=SiteSettingsResponse)
def read_settings(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    _: User = Depends(require_admin),
) -> SiteSettingsResponse:
    site_settings = get_site_settings_uc(db, settings)
    return SiteSettingsResponse(settings=SiteSettingsRead.from_entity(site_settings))


@router.put("/settings", response_model=SiteSettingsResponse)
def update_settings(
    payload: SiteSettingsUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    _: User = Depends(require_admin),
) -> SiteSettingsResponse:
    """Replace the branding settings; omitted values reset to their defaults."""

    site_settings = update_site_settings_uc(
        db,
        settings,
        site_name=payload.site_name,
        site_icon=payload.site_icon,
        header_image=payload.header_image,
    )
    return SiteSettingsResponse(
        message="Settings updated successfully",
        settings=SiteSettingsRead.from_entity(site_settings),
    )


__all__ = ["UPLOAD_PATH", "router"]
