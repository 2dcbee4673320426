"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.error import NotFoundError
from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId, SubjectId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_subject(self, subject_id: SubjectId) -> list[Comment]:
        """Find all comments for a subject in insertion order."""
        return [c for c in self._comments.values() if c.subject_id == subject_id]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def apply_like_delta(self, comment_id: CommentId, delta: int) -> int:
        """Add delta to like_count."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))

        updated = comment.model_copy(
            update={
                "like_count": comment.like_count + delta,
                "updated_at": datetime.now(),
            }
        )
        self._comments[comment_id] = updated
        return updated.like_count
