"""Utility script to create a user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from filegate.application.use_cases.users.create_user import create_user
from filegate.domain.entities import Role
from filegate.domain.exceptions import FileGateError
from filegate.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a user for the FileGate API.",
    )
    parser.add_argument(
        "--username",
        required=True,
        help="Username of the new account (at most 6 characters)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the new account. Prompted interactively when omitted.",
    )
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Create the account with the admin role.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No password provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            username=args.username,
            password=password,
            role=Role.ADMIN if args.admin else Role.USER,
        )
    except FileGateError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc.message}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Username: {user.username}\n"
            f"  Role: {user.role.value}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
