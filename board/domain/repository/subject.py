"""Subject repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.subject import Subject
from board.domain.value import SubjectId


class SubjectRepository(ABC):
    """Repository for Subject aggregate.

    Defines the contract for subject persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, subject_id: SubjectId) -> Optional[Subject]:
        """Find a subject by ID.

        Args:
            subject_id: The subject's unique identifier

        Returns:
            The subject if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Subject]:
        """Find all subjects, newest first.

        Returns:
            Subjects ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, subject: Subject) -> Subject:
        """Save a subject (create or update).

        Args:
            subject: The subject to save

        Returns:
            The saved subject
        """
        pass

    @abstractmethod
    async def apply_like_delta(self, subject_id: SubjectId, delta: int) -> int:
        """Atomically add a vote delta to the subject's like count.

        Must be a single atomic increment, never read-modify-write, so that
        concurrent voters do not lose updates. Also stamps updated_at.

        Args:
            subject_id: Subject ID
            delta: Net score change (-2..2)

        Returns:
            The like count after the increment
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, subject_id: SubjectId) -> None:
        """Atomically increment the subject's comment count by 1.

        Args:
            subject_id: Subject ID
        """
        pass
