from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from filegate.application.use_cases.catalog import (
    create_category,
    delete_file,
    list_categories,
    record_file,
)
from filegate.domain.entities import FileAsset
from filegate.domain.exceptions import (
    CategoryNotFoundError,
    EmptyCategoryNameError,
    FileAssetNotFoundError,
)
from filegate.infrastructure.models import FileAssetModel
from filegate.infrastructure.repositories import FileAssetRepository
from filegate.infrastructure.storage import LocalFileStorage


def _store(storage: LocalFileStorage, name: str, content: bytes) -> None:
    storage.resolve(name).write_bytes(content)


def test_bootstrap_seeds_default_category(session):
    assert [category.name for category in list_categories(session)] == ["SPOOFER4YOU"]


def test_create_category_trims_and_allows_duplicates(session):
    first = create_category(session, "  Tools ")
    second = create_category(session, "Tools")

    assert first.name == second.name == "Tools"
    assert first.id != second.id


@pytest.mark.parametrize("name", [None, "", "   "])
def test_create_category_rejects_empty_names(session, name):
    with pytest.raises(EmptyCategoryNameError):
        create_category(session, name)


def test_categories_by_name_and_files_newest_first(session):
    beta = create_category(session, "beta")
    alpha = create_category(session, "alpha")
    repository = FileAssetRepository(session)
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for offset, name in enumerate(["old.zip", "new.zip"]):
        repository.create(
            FileAsset(
                id=None,
                stored_name=f"{offset}.zip",
                original_name=name,
                storage_path=f"{offset}.zip",
                size_bytes=10,
                category_id=alpha.id,
                uploaded_at=base + timedelta(hours=offset),
            )
        )

    categories = list_categories(session)

    assert [category.name for category in categories] == ["SPOOFER4YOU", "alpha", "beta"]
    by_id = {category.id: category for category in categories}
    assert [item.original_name for item in by_id[alpha.id].files] == ["new.zip", "old.zip"]
    assert by_id[beta.id].files == []


def test_recorded_file_is_listed_under_its_category(session):
    category = create_category(session, "Tools")

    recorded = record_file(
        session,
        stored_name="1-abc.exe",
        original_name="tool.exe",
        storage_path="1-abc.exe",
        size_bytes=1536,
        category_id=category.id,
    )

    listed = {item.id: item for item in list_categories(session)}[category.id].files
    assert len(listed) == 1
    assert listed[0].original_name == "tool.exe"
    assert listed[0].size_bytes == 1536
    assert listed[0].uploaded_at == recorded.uploaded_at


def test_record_file_requires_existing_category(session):
    with pytest.raises(CategoryNotFoundError):
        record_file(
            session,
            stored_name="1-abc.exe",
            original_name="tool.exe",
            storage_path="1-abc.exe",
            size_bytes=4,
            category_id="missing",
        )
    assert session.query(FileAssetModel).count() == 0


def _recorded(session, storage) -> FileAsset:
    category = create_category(session, "Tools")
    _store(storage, "1-abc.exe", b"MZ\x90\x00")
    return record_file(
        session,
        stored_name="1-abc.exe",
        original_name="tool.exe",
        storage_path="1-abc.exe",
        size_bytes=4,
        category_id=category.id,
    )


def test_delete_file_removes_bytes_and_row(session, storage):
    file_asset = _recorded(session, storage)

    delete_file(session, storage, file_asset.id)

    assert not storage.exists("1-abc.exe")
    assert FileAssetRepository(session).get(file_asset.id) is None


def test_delete_file_with_missing_object_still_removes_row(session, storage):
    file_asset = _recorded(session, storage)
    storage.resolve("1-abc.exe").unlink()

    delete_file(session, storage, file_asset.id)

    assert FileAssetRepository(session).get(file_asset.id) is None


def test_delete_file_ignores_storage_errors(session, storage):
    file_asset = _recorded(session, storage)

    class FailingStorage(LocalFileStorage):
        def delete(self, storage_path: str) -> bool:
            raise PermissionError("read-only volume")

    delete_file(session, FailingStorage(storage.root), file_asset.id)

    assert FileAssetRepository(session).get(file_asset.id) is None


def test_delete_unknown_file(session, storage):
    with pytest.raises(FileAssetNotFoundError):
        delete_file(session, storage, "missing")


def test_failed_row_delete_rolls_back_the_session(session, monkeypatch):
    repository = FileAssetRepository(session)
    rollbacks = []
    original_rollback = session.rollback

    def failing_query(*args, **kwargs):
        raise OperationalError("DELETE", {}, Exception("disk I/O error"))

    def recording_rollback():
        rollbacks.append(True)
        original_rollback()

    monkeypatch.setattr(session, "query", failing_query)
    monkeypatch.setattr(session, "rollback", recording_rollback)

    with pytest.raises(OperationalError):
        repository.delete("any")

    assert rollbacks == [True]
