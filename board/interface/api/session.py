"""Request helpers for session cookies and path identifiers."""

from uuid import UUID

from fastapi import Response

from board.config import Settings
from board.domain.service import JWTService
from board.interface.error import AuthenticationRequiredError, NotFoundError

AUTH_COOKIE = "auth_token"


def require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Return the signed-in user's ID.

    Raises:
        AuthenticationRequiredError: If the cookie is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise AuthenticationRequiredError(f"Authentication required to {action}")
    return user_id


def parse_id(value: str, resource: str) -> str:
    """Validate a path identifier.

    A malformed ID cannot name an existing resource, so it is reported as
    not found.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        UUID(value)
    except ValueError:
        raise NotFoundError(f"{resource} not found")
    return value


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie."""
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response) -> None:
    """Delete the session cookie with the same path it was set on."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
