"""Unit tests for LoginUseCase and GetCurrentUserUseCase."""

from uuid import uuid4

import pytest

from board.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from board.domain.error import AuthenticationError, NotFoundError
from board.domain.service import JWTService, UserService
from board.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _register(unit_env):
    user_service = await unit_env.get(UserService)
    return await user_service.register("jane_smith", "jane@example.com", "password123")


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_success(self, unit_env):
        # Arrange
        user = await _register(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        # Act
        response = await use_case.execute(
            LoginRequest(email="jane@example.com", password="password123")
        )

        # Assert
        assert response.user.id == str(user.id)
        assert response.token

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, unit_env):
        await _register(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(
                LoginRequest(email="jane@example.com", password="wrong-password")
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_token_resolves_to_user(self, unit_env):
        # Arrange
        user = await _register(unit_env)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(str(user.id), user.username.root)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.user.username == "jane_smith"

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-token"))

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(str(uuid4()), "ghost_user")
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentUserRequest(token=token))
