"""PostgreSQL implementation of Subject repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import NotFoundError
from board.domain.model import Subject
from board.domain.repository import SubjectRepository
from board.domain.value import SubjectId
from board.persistence.mappers import row_to_subject, subject_to_dict
from board.persistence.tables import subjects_table


class PostgresSubjectRepository(SubjectRepository):
    """PostgreSQL implementation of SubjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, subject_id: SubjectId) -> Optional[Subject]:
        """Find a subject by ID."""
        stmt = select(subjects_table).where(subjects_table.c.id == subject_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_subject(row._asdict()) if row else None

    async def find_all(self) -> List[Subject]:
        """Find all subjects, newest first."""
        stmt = select(subjects_table).order_by(desc(subjects_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_subject(row._asdict()) for row in result.fetchall()]

    async def save(self, subject: Subject) -> Subject:
        """Save a subject (create or update)."""
        subject_dict = subject_to_dict(subject)
        existing = await self.find_by_id(subject.id)

        if existing:
            stmt = (
                subjects_table.update()
                .where(subjects_table.c.id == subject.id)
                .values(**subject_dict)
            )
        else:
            stmt = subjects_table.insert().values(**subject_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return subject

    async def apply_like_delta(self, subject_id: SubjectId, delta: int) -> int:
        """Atomically add delta to like_count in a single UPDATE."""
        stmt = (
            update(subjects_table)
            .where(subjects_table.c.id == subject_id)
            .values(
                like_count=subjects_table.c.like_count + delta,
                updated_at=datetime.now(),
            )
            .returning(subjects_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        like_count = result.scalar_one_or_none()
        if like_count is None:
            raise NotFoundError("Subject", str(subject_id))

        await self.session.flush()
        return like_count

    async def increment_comment_count(self, subject_id: SubjectId) -> None:
        """Atomically increment comment_count by 1."""
        stmt = (
            update(subjects_table)
            .where(subjects_table.c.id == subject_id)
            .values(comment_count=subjects_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
