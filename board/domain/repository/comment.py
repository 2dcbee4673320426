"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, SubjectId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_subject(self, subject_id: SubjectId) -> List[Comment]:
        """Find all comments for a subject as a flat list.

        Order is unspecified; threading and sorting happen in the domain.

        Args:
            subject_id: The subject ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def apply_like_delta(self, comment_id: CommentId, delta: int) -> int:
        """Atomically add a vote delta to the comment's like count.

        Must be a single atomic increment, never read-modify-write. Also
        stamps updated_at.

        Args:
            comment_id: Comment ID
            delta: Net score change (-2..2)

        Returns:
            The like count after the increment
        """
        pass
