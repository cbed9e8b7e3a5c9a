"""Utility script to add a local file to the download catalog."""

from __future__ import annotations

import argparse
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from filegate.application.use_cases.ingestion import ingest_file
from filegate.config import get_settings
from filegate.domain.exceptions import FileGateError
from filegate.infrastructure.database import SessionLocal, initialize_database
from filegate.infrastructure.storage import get_file_storage


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the import."""

    parser = argparse.ArgumentParser(
        description="Store a local file in a FileGate category.",
    )
    parser.add_argument("path", type=Path, help="File to import")
    parser.add_argument(
        "--category-id",
        required=True,
        help="Identifier of the category receiving the file",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if not args.path.is_file():
        raise SystemExit(f"No such file: {args.path}")

    settings = get_settings()
    initialize_database()

    session = SessionLocal()
    try:
        with args.path.open("rb") as source:
            file_asset = ingest_file(
                session,
                get_file_storage(),
                source=source,
                original_filename=args.path.name,
                declared_size=args.path.stat().st_size,
                category_id=args.category_id,
                allowed_extensions=settings.allowed_extensions,
                max_bytes=settings.max_upload_bytes,
            )
    except FileGateError as exc:
        session.rollback()
        raise SystemExit(f"Could not import the file: {exc.message}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while recording the file: {exc}") from exc
    else:
        print(
            "File imported:\n"
            f"  ID: {file_asset.id}\n"
            f"  Name: {file_asset.original_name}\n"
            f"  Stored as: {file_asset.stored_name}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
