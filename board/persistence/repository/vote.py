"""PostgreSQL implementation of Vote repository."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import UserId, VotableType
from board.persistence.mappers import row_to_vote, vote_to_dict
from board.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def lock(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> AsyncIterator[None]:
        """Take a transaction-scoped advisory lock for the user and item.

        The lock is released by Postgres when the request's transaction
        commits or rolls back, after the like count delta has been written.
        """
        key = f"vote:{user_id}:{votable_type.value}:{votable_id}"
        await self.session.execute(
            select(func.pg_advisory_xact_lock(func.hashtextextended(key, 0)))
        )
        yield

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert the vote, or switch the type of the user's existing vote."""
        vote_dict = vote_to_dict(vote)
        stmt = insert(votes_table).values(**vote_dict)
        stmt = stmt.on_conflict_do_update(
            constraint="unique_vote",
            set_={
                "vote_type": stmt.excluded.vote_type,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a vote by user and votable."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
