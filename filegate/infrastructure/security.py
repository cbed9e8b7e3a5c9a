"""Security helpers for hashing and token generation."""

from datetime import timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from filegate.config import get_settings
from filegate.domain.entities import Role, User
from filegate.domain.exceptions import InvalidTokenError, TokenExpiredError
from filegate.utils import utc_now

# Hashing runs synchronously on the request thread and is never cached.
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=get_settings().password_hash_rounds,
)

# Verified against when the username is unknown so both failures cost the same.
_DUMMY_HASH = pwd_context.hash("filegate-timing-equalizer")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def burn_password_check(plain_password: str) -> None:
    """Spend the same time as :func:`verify_password` without a real hash."""

    pwd_context.verify(plain_password, _DUMMY_HASH)


# ---- JWT ----


def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Sign a token carrying the identity id, username and role of ``user``.

    Tokens only carry an ``exp`` claim when ``expires_delta`` is given or
    ``ACCESS_TOKEN_EXPIRE_MINUTES`` is configured.
    """

    settings = get_settings()
    claims: dict[str, object] = {
        "sub": user.id,
        "username": user.username,
        "role": user.role.value,
    }
    if expires_delta is None and settings.access_token_expire_minutes:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    if expires_delta is not None:
        claims["exp"] = utc_now() + expires_delta
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """Return the validated claims of ``token``."""

    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except JWTError as exc:
        raise InvalidTokenError() from exc

    if not isinstance(payload.get("sub"), str) or not isinstance(payload.get("username"), str):
        raise InvalidTokenError()
    try:
        Role(payload.get("role"))
    except ValueError as exc:
        raise InvalidTokenError() from exc
    return payload


__all__ = [
    "burn_password_check",
    "create_access_token",
    "decode_access_token",
    "get_password_hash",
    "pwd_context",
    "verify_password",
]
