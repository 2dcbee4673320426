"""Register use case."""

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import JWTService, UserService

from .user_info import UserInfo


class RegisterRequest(BaseModel):
    """Registration form."""

    username: str
    email: str
    password: str
    phone: str | None = None


class RegisterResponse(BaseModel):
    """Registration result.

    The token is set as a cookie by the route and never serialized to the body.
    """

    token: str
    user: UserInfo


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and starting a session."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Raises:
            ValidationError: If a field is malformed
            ConflictError: If the email or username is already taken
        """
        user = await self.user_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
            phone=request.phone,
        )
        token = self.jwt_service.create_token(
            user_id=str(user.id), username=user.username.root
        )
        logfire.info("Registration complete", user_id=str(user.id))
        return RegisterResponse(token=token, user=UserInfo.from_user(user))
