"""In-memory subject repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.error import NotFoundError
from board.domain.model.subject import Subject
from board.domain.repository.subject import SubjectRepository
from board.domain.value import SubjectId


class InMemorySubjectRepository(SubjectRepository):
    """In-memory implementation of SubjectRepository for testing."""

    def __init__(self) -> None:
        self._subjects: dict[SubjectId, Subject] = {}

    async def find_by_id(self, subject_id: SubjectId) -> Optional[Subject]:
        """Find a subject by ID."""
        return self._subjects.get(subject_id)

    async def find_all(self) -> list[Subject]:
        """Find all subjects, newest first."""
        return sorted(
            self._subjects.values(), key=lambda s: s.created_at, reverse=True
        )

    async def save(self, subject: Subject) -> Subject:
        """Save or update a subject."""
        self._subjects[subject.id] = subject
        return subject

    async def apply_like_delta(self, subject_id: SubjectId, delta: int) -> int:
        """Add delta to like_count."""
        subject = self._subjects.get(subject_id)
        if subject is None:
            raise NotFoundError("Subject", str(subject_id))

        updated = subject.model_copy(
            update={
                "like_count": subject.like_count + delta,
                "updated_at": datetime.now(),
            }
        )
        self._subjects[subject_id] = updated
        return updated.like_count

    async def increment_comment_count(self, subject_id: SubjectId) -> None:
        """Increment comment_count by 1."""
        subject = self._subjects.get(subject_id)
        if subject:
            self._subjects[subject_id] = subject.model_copy(
                update={"comment_count": subject.comment_count + 1}
            )
