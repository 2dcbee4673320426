"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import JWTService, UserService
from board.domain.value import UserId

from .user_info import UserInfo


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        return GetCurrentUserResponse(user=UserInfo.from_user(user))
