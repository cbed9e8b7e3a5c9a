"""Schemas for categories and files."""

from datetime import datetime

from filegate.domain.entities import Category, FileAsset
from filegate.utils import format_file_size

from .common import ApiResponse, CamelModel


class FileRead(CamelModel):
    id: str
    filename: str
    size: str
    size_bytes: int
    uploaded_at: datetime | None

    @classmethod
    def from_entity(cls, file_asset: FileAsset) -> "FileRead":
        return cls(
            id=file_asset.id,
            filename=file_asset.original_name,
            size=format_file_size(file_asset.size_bytes),
            size_bytes=file_asset.size_bytes,
            uploaded_at=file_asset.uploaded_at,
        )


class CategoryRead(CamelModel):
    id: str
    name: str
    files: list[FileRead] = []

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryRead":
        return cls(
            id=category.id,
            name=category.name,
            files=[FileRead.from_entity(item) for item in category.files],
        )


class CategoryListResponse(ApiResponse):
    categories: list[CategoryRead]


class CategoryCreate(CamelModel):
    name: str | None = None


class CategoryCreateResponse(ApiResponse):
    category: CategoryRead


class FileUploadResponse(ApiResponse):
    file: FileRead


__all__ = [
    "CategoryCreate",
    "CategoryCreateResponse",
    "CategoryListResponse",
    "CategoryRead",
    "FileRead",
    "FileUploadResponse",
]
