"""Vote repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional, Sequence
from uuid import UUID

from board.domain.model.vote import Vote
from board.domain.value import UserId, VotableType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    def lock(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> AbstractAsyncContextManager[None]:
        """Serialize vote changes by one user on one item.

        A vote change reads the user's vote, decides the transition and then
        writes the vote and the like count delta. Holding this lock across
        those steps stops two concurrent requests from the same user from
        both starting from the same vote and double counting.

        Args:
            user_id: The user's ID
            votable_type: Type of item (subject or comment)
            votable_id: ID of the item

        Returns:
            Async context manager holding the lock
        """
        pass

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (subject or comment)
            votable_id: ID of the item

        Returns:
            The vote if found, None if the user is neutral
        """
        pass

    @abstractmethod
    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            votable_type: Type of items (subject or comment)
            votable_ids: Item IDs to check

        Returns:
            List of votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Create the vote or replace the type of the user's existing vote.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a user's vote on an item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (subject or comment)
            votable_id: ID of the item

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
