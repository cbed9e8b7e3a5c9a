import pytest

from filegate.application.use_cases.users import (
    authenticate_user,
    create_user,
    get_user_from_token,
    list_users,
    login,
    register_user,
)
from filegate.application.use_cases.subscriptions import grant_subscription
from filegate.domain.entities import Role
from filegate.domain.exceptions import (
    InvalidCredentialsError,
    InvalidInputError,
    InvalidTokenError,
    UsernameTakenError,
)
from filegate.infrastructure.models import UserModel


def _user_count(session) -> int:
    return session.query(UserModel).count()


def test_register_creates_regular_user_with_hashed_password(session):
    user = register_user(session, username="bob", password="secret1")

    assert user.id
    assert user.role is Role.USER
    assert user.password != "secret1"


@pytest.mark.parametrize(
    ("username", "password", "message"),
    [
        ("toolong1", "secret1", "Username must be 6 characters or less"),
        ("bob", "short", "Password must be at least 6 characters long"),
        ("", "secret1", "Username and password required"),
        ("bob", None, "Username and password required"),
    ],
)
def test_register_rejects_invalid_input_before_writing(session, username, password, message):
    before = _user_count(session)

    with pytest.raises(InvalidInputError) as excinfo:
        register_user(session, username=username, password=password)

    assert excinfo.value.message == message
    assert _user_count(session) == before


def test_usernames_are_unique_and_case_sensitive(session):
    register_user(session, username="bob", password="secret1")

    with pytest.raises(UsernameTakenError):
        register_user(session, username="bob", password="secret2")

    assert register_user(session, username="Bob", password="secret2").username == "Bob"


def test_unknown_user_and_wrong_password_fail_identically(session):
    register_user(session, username="bob", password="secret1")

    with pytest.raises(InvalidCredentialsError) as unknown:
        authenticate_user(session, "alice", "secret1")
    with pytest.raises(InvalidCredentialsError) as wrong:
        authenticate_user(session, "bob", "secret2")

    assert unknown.value.message == wrong.value.message == "Invalid credentials"


def test_login_rejects_long_username_before_lookup(session):
    with pytest.raises(InvalidInputError):
        login(session, "toolong1", "secret1")


def test_login_token_resolves_back_to_user(session):
    created = register_user(session, username="bob", password="secret1")

    token, user = login(session, "bob", "secret1")

    assert user.id == created.id
    assert get_user_from_token(session, token).username == "bob"


def test_token_of_deleted_user_is_rejected(session):
    created = register_user(session, username="bob", password="secret1")
    token, _ = login(session, "bob", "secret1")

    session.query(UserModel).filter(UserModel.id == created.id).delete()
    session.commit()

    with pytest.raises(InvalidTokenError):
        get_user_from_token(session, token)


def test_list_users_pairs_each_user_with_active_grant(session):
    bob = create_user(session, username="bob", password="secret1")
    create_user(session, username="alice", password="secret1")
    grant_subscription(session, user_id=bob.id, type="7days", days=7)

    listed = {user.username: subscription for user, subscription in list_users(session)}

    assert set(listed) == {"admin", "bob", "alice"}
    assert listed["bob"] is not None
    assert listed["bob"].is_active
    assert listed["alice"] is None
