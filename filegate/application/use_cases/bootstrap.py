"""First-run seeding of the administrator, default category and branding."""

import logging

from sqlalchemy.orm import Session

from filegate.application.use_cases.catalog import create_category
from filegate.application.use_cases.site_settings import default_site_settings
from filegate.application.use_cases.users import create_user
from filegate.config import Settings
from filegate.domain.entities import Role
from filegate.domain.exceptions import UsernameTakenError
from filegate.infrastructure.repositories import (
    CategoryRepository,
    SettingRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

_DEFAULT_ADMIN_PASSWORD = "admin123"


def bootstrap(session: Session, settings: Settings) -> None:
    """Create the records a fresh installation needs. Safe to run repeatedly."""

    if UserRepository(session).get_by_username(settings.admin_username) is None:
        try:
            create_user(
                session,
                username=settings.admin_username,
                password=settings.admin_password,
                role=Role.ADMIN,
            )
        except UsernameTakenError:
            logger.info("Admin %s was created concurrently", settings.admin_username)
        if settings.admin_password == _DEFAULT_ADMIN_PASSWORD:
            logger.warning(
                "Seeded admin %s with the default password; set ADMIN_PASSWORD",
                settings.admin_username,
            )

    if CategoryRepository(session).count() == 0 and settings.default_category_name.strip():
        create_category(session, settings.default_category_name)

    SettingRepository(session).set_many(default_site_settings(settings), overwrite=False)

    if settings.secret_key == "change-me":
        logger.warning("SECRET_KEY is not configured; tokens are signed with the default")
