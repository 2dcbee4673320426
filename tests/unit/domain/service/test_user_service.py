"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from board.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from board.domain.service import UserService
from board.domain.value import UserId
from board.util.password import verify_password
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for UserService.register."""

    @pytest.mark.asyncio
    async def test_register_stores_hashed_password(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)

        # Act
        user = await service.register(
            "alice", "alice@example.com", "secret123", phone="+1234567890"
        )

        # Assert
        assert user.username.root == "alice"
        assert user.email.root == "alice@example.com"
        assert user.phone.root == "+1234567890"
        assert user.password_hash != "secret123"
        assert verify_password("secret123", user.password_hash)

    @pytest.mark.asyncio
    async def test_register_without_phone(self, unit_env):
        service = await unit_env.get(UserService)

        user = await service.register("alice", "alice@example.com", "secret123")

        assert user.phone is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,email,password,message",
        [
            ("al", "alice@example.com", "secret123", "Username"),
            ("alice!", "alice@example.com", "secret123", "Username"),
            ("alice", "not-an-email", "secret123", "email"),
            ("alice", "alice@example.com", "short", "Password"),
        ],
    )
    async def test_register_rejects_invalid_fields(
        self, unit_env, username, email, password, message
    ):
        service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match=message):
            await service.register(username, email, password)

    @pytest.mark.asyncio
    async def test_register_rejects_invalid_phone(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="phone"):
            await service.register(
                "alice", "alice@example.com", "secret123", phone="12"
            )

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        await service.register("alice", "alice@example.com", "secret123")

        # Act / Assert
        with pytest.raises(ConflictError):
            await service.register("alice2", "alice@example.com", "secret123")

    @pytest.mark.asyncio
    async def test_duplicate_username(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        await service.register("alice", "alice@example.com", "secret123")

        # Act / Assert
        with pytest.raises(ConflictError):
            await service.register("alice", "other@example.com", "secret123")


class TestAuthenticate:
    """Tests for UserService.authenticate."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        registered = await service.register("alice", "alice@example.com", "secret123")

        # Act
        user = await service.authenticate("alice@example.com", "secret123")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("alice", "alice@example.com", "secret123")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await service.authenticate("alice@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(AuthenticationError):
            await service.authenticate("nobody@example.com", "secret123")

    @pytest.mark.asyncio
    async def test_malformed_email(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(AuthenticationError):
            await service.authenticate("nobody", "secret123")


class TestGetById:
    """Tests for UserService.get_by_id."""

    @pytest.mark.asyncio
    async def test_found(self, unit_env):
        service = await unit_env.get(UserService)
        registered = await service.register("alice", "alice@example.com", "secret123")

        user = await service.get_by_id(registered.id)

        assert user.username.root == "alice"

    @pytest.mark.asyncio
    async def test_not_found(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_id(UserId(uuid4()))

        assert exc_info.value.resource == "User"
