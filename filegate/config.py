"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_ALLOWED_EXTENSIONS = (".zip", ".rar", ".exe", ".dll", ".data", ".7z")
FIVE_GIB = 5 * 1024 * 1024 * 1024


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    app_name: str = Field(default="FileGate", description="Title of the API application")
    database_url: str = Field(
        default="sqlite:///./filegate.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        default="change-me", description="Secret key for signing JWT tokens", min_length=1
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signature algorithm")
    password_hash_rounds: int = Field(
        default=310_000, description="PBKDF2 rounds used when hashing passwords", ge=1000
    )
    access_token_expire_minutes: int | None = Field(
        default=None,
        description=(
            "Number of minutes before access tokens expire. When unset tokens carry "
            "no expiration claim"
        ),
        gt=0,
    )
    upload_dir: str = Field(
        default="uploads", description="Directory where uploaded file bytes are stored"
    )
    max_upload_bytes: int = Field(
        default=FIVE_GIB, description="Maximum accepted size of a single upload", gt=0
    )
    allowed_extensions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_EXTENSIONS),
        description="File extensions accepted by the upload endpoint",
    )
    admin_username: str = Field(
        default="admin",
        description="Username of the administrator seeded on first run",
        min_length=1,
        max_length=6,
    )
    admin_password: str = Field(
        default="admin123",
        description="Password of the administrator seeded on first run",
        min_length=6,
    )
    default_category_name: str = Field(
        default="SPOOFER4YOU", description="Category created when the catalog is empty"
    )
    default_site_name: str = Field(
        default="SPOOFER4YOU", description="Site name used until an admin changes it"
    )
    api_prefix: str = Field(default="/api", description="Prefix mounted before every route")
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"], description="Origins allowed by the CORS middleware"
    )
    log_level: str = Field(default="INFO", description="Level of the application logger")

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str):
            value = value.split(",")
        normalized = []
        for item in value:
            item = item.strip().lower()
            if not item:
                continue
            normalized.append(item if item.startswith(".") else f".{item}")
        return normalized

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = f"/{value}"
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
