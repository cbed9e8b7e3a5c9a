"""Use cases for the site branding settings."""

from sqlalchemy.orm import Session

from filegate.config import Settings
from filegate.domain.entities import SiteSettings
from filegate.domain.entities.site_settings import (
    HEADER_IMAGE_KEY,
    SITE_ICON_KEY,
    SITE_NAME_KEY,
)
from filegate.infrastructure.repositories import SettingRepository


def default_site_settings(settings: Settings) -> dict[str, str]:
    return {
        SITE_NAME_KEY: settings.default_site_name,
        SITE_ICON_KEY: "",
        HEADER_IMAGE_KEY: "",
    }


def get_site_settings(session: Session, settings: Settings) -> SiteSettings:
    values = {**default_site_settings(settings), **SettingRepository(session).get_all()}
    return SiteSettings(
        site_name=values[SITE_NAME_KEY],
        site_icon=values[SITE_ICON_KEY],
        header_image=values[HEADER_IMAGE_KEY],
    )


def update_site_settings(
    session: Session,
    settings: Settings,
    *,
    site_name: str | None,
    site_icon: str | None,
    header_image: str | None,
) -> SiteSettings:
    """Replace all branding values; empty values fall back to the defaults."""

    defaults = default_site_settings(settings)
    SettingRepository(session).set_many(
        {
            SITE_NAME_KEY: site_name or defaults[SITE_NAME_KEY],
            SITE_ICON_KEY: site_icon or defaults[SITE_ICON_KEY],
            HEADER_IMAGE_KEY: header_image or defaults[HEADER_IMAGE_KEY],
        }
    )
    return get_site_settings(session, settings)
