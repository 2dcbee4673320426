"""In-memory vote repository for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional, Sequence
from uuid import UUID

from board.domain.model.vote import Vote
from board.domain.repository.vote import VoteRepository
from board.domain.value import UserId, VotableType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user, votable type, votable id), which mirrors the
    unique constraint on the votes table.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, VotableType, UUID], Vote] = {}
        self._locks: dict[tuple[UserId, VotableType, UUID], asyncio.Lock] = {}

    @asynccontextmanager
    async def lock(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> AsyncIterator[None]:
        """Hold a per-(user, item) asyncio lock for the duration of the block."""
        lock = self._locks.setdefault((user_id, votable_type, votable_id), asyncio.Lock())
        async with lock:
            yield

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        return self._votes.get((user_id, votable_type, votable_id))

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        wanted = set(votable_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert the vote, or switch the type of the user's existing vote."""
        key = (vote.user_id, vote.votable_type, vote.votable_id)
        existing = self._votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={"vote_type": vote.vote_type, "updated_at": vote.updated_at}
            )
        self._votes[key] = vote
        return vote

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a vote by user and votable item."""
        return self._votes.pop((user_id, votable_type, votable_id), None) is not None
