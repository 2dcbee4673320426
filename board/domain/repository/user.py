"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.user import User
from board.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email address.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email_or_username(
        self, email: Email, username: Username
    ) -> Optional[User]:
        """Find a user holding either the email or the username.

        Used to reject duplicate registrations.

        Args:
            email: Email address to match
            username: Username to match

        Returns:
            A matching user if any, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
