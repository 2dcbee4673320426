"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from board.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UserInfo,
)
from board.config import Settings
from board.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from board.interface.api.session import clear_session_cookie, set_session_cookie
from board.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class AuthResponse(BaseModel):
    """Signed-in user. The session token travels only in the cookie."""

    user: UserInfo


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account and sign the new user in.

    Raises:
        HTTPException: 400 on invalid fields, 409 if email or username is taken
    """
    try:
        result = await register_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    set_session_cookie(response, result.token, settings)
    return AuthResponse(user=result.user)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Sign in with email and password.

    Raises:
        HTTPException: 401 on unknown email or wrong password
    """
    try:
        result = await login_use_case.execute(request)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    set_session_cookie(response, result.token, settings)
    logfire.info("Auth cookie set", user_id=result.user.id)
    return AuthResponse(user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    clear_session_cookie(response)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthResponse:
    """Get the signed-in user.

    Raises:
        HTTPException: 401 if there is no valid session
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )

    try:
        result = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError):
        # Expired token, or the user behind it no longer exists
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    return AuthResponse(user=result.user)
