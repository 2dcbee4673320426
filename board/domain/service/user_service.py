"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from board.config import AuthSettings
from board.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Email, PhoneNumber, UserId, Username
from board.util.password import hash_password, verify_password

from .base import Service

MIN_PASSWORD_LENGTH = 6


class UserService(Service):
    """Domain service for registration, login and user lookup."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        phone: str | None = None,
    ) -> User:
        """Register a new user.

        Args:
            username: Desired username
            email: Email address
            password: Plain-text password (at least 6 characters)
            phone: Optional phone number

        Returns:
            Created user

        Raises:
            ValidationError: If any field is malformed
            ConflictError: If the email or username is already taken
        """
        with logfire.span("user_service.register", username=username):
            valid_username = Username.parse(username)
            valid_email = Email.parse(email)
            valid_phone = PhoneNumber.parse(phone) if phone else None
            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
                )

            existing = await self.user_repository.find_by_email_or_username(
                valid_email, valid_username
            )
            if existing:
                logfire.warn("Duplicate registration attempt", username=username)
                raise ConflictError("User with this email or username already exists")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=valid_username,
                email=valid_email,
                phone=valid_phone,
                password_hash=hash_password(
                    password, rounds=self.auth_settings.bcrypt_rounds
                ),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), username=username
            )
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check login credentials.

        Args:
            email: Email address
            password: Plain-text password

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            try:
                valid_email = Email.parse(email)
            except ValidationError:
                raise AuthenticationError()

            user = await self.user_repository.find_by_email(valid_email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise AuthenticationError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User

        Raises:
            NotFoundError: If user does not exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user
