"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import NotFoundError
from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, SubjectId
from board.persistence.mappers import comment_to_dict, row_to_comment
from board.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_subject(self, subject_id: SubjectId) -> List[Comment]:
        """Find all comments for a subject in insertion order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.subject_id == subject_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def apply_like_delta(self, comment_id: CommentId, delta: int) -> int:
        """Atomically add delta to like_count in a single UPDATE."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                like_count=comments_table.c.like_count + delta,
                updated_at=datetime.now(),
            )
            .returning(comments_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        like_count = result.scalar_one_or_none()
        if like_count is None:
            raise NotFoundError("Comment", str(comment_id))

        await self.session.flush()
        return like_count
