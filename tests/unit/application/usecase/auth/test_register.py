"""Unit tests for RegisterUseCase."""

import pytest

from board.application.usecase.auth import RegisterRequest, RegisterUseCase
from board.domain.error import ConflictError, ValidationError
from board.domain.service import JWTService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token_and_user(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(
            RegisterRequest(
                username="john_doe",
                email="john@example.com",
                password="password123",
                phone="+1234567890",
            )
        )

        # Assert
        assert response.user.username == "john_doe"
        assert response.user.email == "john@example.com"
        assert response.user.phone == "+1234567890"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.user.id
        assert payload.username == "john_doe"

    @pytest.mark.asyncio
    async def test_user_info_has_no_password(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)

        response = await use_case.execute(
            RegisterRequest(
                username="john_doe", email="john@example.com", password="password123"
            )
        )

        assert "password_hash" not in response.user.model_dump()

    @pytest.mark.asyncio
    async def test_duplicate_registration(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        request = RegisterRequest(
            username="john_doe", email="john@example.com", password="password123"
        )
        await use_case.execute(request)

        # Act / Assert
        with pytest.raises(ConflictError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_short_password(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                RegisterRequest(
                    username="john_doe", email="john@example.com", password="12345"
                )
            )
