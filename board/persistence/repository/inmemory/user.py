"""In-memory user repository for testing."""

from typing import Optional

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email address."""
        for user in self._users.values():
            if user.email.root == email.root:
                return user
        return None

    async def find_by_email_or_username(
        self, email: Email, username: Username
    ) -> Optional[User]:
        """Find a user holding either the email or the username."""
        for user in self._users.values():
            if user.email.root == email.root or user.username.root == username.root:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
