"""Schemas for the site branding settings."""

from filegate.domain.entities import SiteSettings

from .common import ApiResponse, CamelModel


class SiteSettingsRead(CamelModel):
    site_name: str
    site_icon: str
    header_image: str

    @classmethod
    def from_entity(cls, settings: SiteSettings) -> "SiteSettingsRead":
        return cls(
            site_name=settings.site_name,
            site_icon=settings.site_icon,
            header_image=settings.header_image,
        )


class SiteSettingsUpdate(CamelModel):
    site_name: str | None = None
    site_icon: str | None = None
    header_image: str | None = None


class SiteSettingsResponse(ApiResponse):
    settings: SiteSettingsRead


__all__ = ["SiteSettingsRead", "SiteSettingsResponse", "SiteSettingsUpdate"]
