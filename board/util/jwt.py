"""Session token helpers.

The session cookie carries an HS256 token whose subject is the user id. The
username rides along so the frontend can greet the user without a lookup.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from board.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims of a board session token."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: str = Field(alias="sub")
    username: str = Field(alias="name")
    issued_at: datetime = Field(alias="iat")
    exp: datetime


class JWTError(Exception):
    """Session token could not be trusted."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Issue a session token valid for ``settings.jwt_expiry_days``."""
    now = datetime.now(timezone.utc)
    payload = TokenPayload(
        user_id=user_id,
        username=username,
        issued_at=now,
        exp=now + timedelta(days=settings.jwt_expiry_days),
    )
    return jwt.encode(
        payload.model_dump(by_alias=True),
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a session token.

    Raises:
        JWTError: If the token is expired, badly signed or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Invalid token") from e
