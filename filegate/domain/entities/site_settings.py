"""Domain entity holding the site branding settings."""

from dataclasses import dataclass

SITE_NAME_KEY = "siteName"
SITE_ICON_KEY = "siteIcon"
HEADER_IMAGE_KEY = "headerImage"


@dataclass
class SiteSettings:
    """Branding values shown by the presentation layer."""

    site_name: str
    site_icon: str
    header_image: str


__all__ = ["HEADER_IMAGE_KEY", "SITE_ICON_KEY", "SITE_NAME_KEY", "SiteSettings"]
