import threading
from datetime import timedelta

import pytest

from filegate.application.use_cases.subscriptions import (
    get_active_subscription,
    grant_subscription,
    has_active_subscription,
)
from filegate.application.use_cases.users import register_user
from filegate.domain.entities import SubscriptionType
from filegate.domain.exceptions import InvalidInputError, UserNotFoundError
from filegate.infrastructure.database import SessionLocal
from filegate.infrastructure.models import SubscriptionModel
from filegate.infrastructure.repositories import SubscriptionRepository
from filegate.utils import utc_now


@pytest.fixture()
def bob(session):
    return register_user(session, username="bob", password="secret1")


def _active_rows(session, user_id: str) -> int:
    session.expire_all()
    return (
        session.query(SubscriptionModel)
        .filter(SubscriptionModel.user_id == user_id, SubscriptionModel.is_active.is_(True))
        .count()
    )


def test_new_user_has_no_subscription(session, bob):
    assert get_active_subscription(session, bob.id) is None
    assert has_active_subscription(session, bob.id) is False


def test_regrant_supersedes_previous_grant(session, bob):
    before = utc_now()
    first = grant_subscription(session, user_id=bob.id, type="30days", days=30)

    active = get_active_subscription(session, bob.id)
    assert active.id == first.id
    assert active.type is SubscriptionType.THIRTY_DAYS
    assert abs(active.expires_at - (before + timedelta(days=30))) < timedelta(minutes=1)

    second = grant_subscription(session, user_id=bob.id, type="7days", days=7)

    history = {grant.id: grant for grant in SubscriptionRepository(session).list_by_user(bob.id)}
    assert history[first.id].is_active is False
    assert history[second.id].is_active is True
    assert abs(second.expires_at - (before + timedelta(days=7))) < timedelta(minutes=1)
    assert _active_rows(session, bob.id) == 1


def test_expired_grant_stays_flagged_but_is_not_active(session, bob):
    grant_subscription(session, user_id=bob.id, type="7days", days=7)

    later = utc_now() + timedelta(days=8)
    assert get_active_subscription(session, bob.id) is not None
    assert has_active_subscription(session, bob.id, now=later) is False


@pytest.mark.parametrize(
    ("type_", "days", "message"),
    [
        (None, 30, "Type and days required"),
        ("30days", None, "Type and days required"),
        ("90days", 90, None),
        ("30days", 0, "Days must be a positive integer"),
        ("30days", -4, "Days must be a positive integer"),
        ("30days", True, "Days must be a positive integer"),
        ("30days", "ten", "Days must be a positive integer"),
    ],
)
def test_invalid_grants_write_nothing(session, bob, type_, days, message):
    with pytest.raises(InvalidInputError) as excinfo:
        grant_subscription(session, user_id=bob.id, type=type_, days=days)

    if message is not None:
        assert excinfo.value.message == message
    assert SubscriptionRepository(session).list_by_user(bob.id) == []


def test_numeric_string_days_are_accepted(session, bob):
    grant = grant_subscription(session, user_id=bob.id, type="60days", days="60")
    assert grant.type is SubscriptionType.SIXTY_DAYS


def test_grant_for_unknown_user_fails(session):
    with pytest.raises(UserNotFoundError):
        grant_subscription(session, user_id="missing", type="7days", days=7)


def test_concurrent_grants_leave_exactly_one_active(session, bob):
    errors: list[BaseException] = []
    start = threading.Barrier(6)

    def worker(days: int) -> None:
        start.wait()
        with SessionLocal() as own_session:
            try:
                grant_subscription(own_session, user_id=bob.id, type="30days", days=days)
            except BaseException as exc:  # collected and asserted below
                errors.append(exc)

    threads = [threading.Thread(target=worker, args=(days,)) for days in range(1, 7)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert _active_rows(session, bob.id) == 1
    assert len(SubscriptionRepository(session).list_by_user(bob.id)) == 6
