"""Login use case."""

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import JWTService, UserService

from .user_info import UserInfo


class LoginRequest(BaseModel):
    """Email/password login."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: UserInfo


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login credentials

        Returns:
            Session token and user info

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with logfire.span("login_user"):
            user = await self.user_service.authenticate(
                request.email, request.password
            )
            token = self.jwt_service.create_token(
                user_id=str(user.id), username=user.username.root
            )
            return LoginResponse(token=token, user=UserInfo.from_user(user))
