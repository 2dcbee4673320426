"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from board.config import ContentSettings
from board.domain.error import NotFoundError, ValidationError
from board.domain.model import Comment, User
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, CommentSortOrder, SubjectId

from .base import Service
from .thread_builder import CommentNode, build_comment_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_settings: Content length limits
        """
        self.comment_repository = comment_repository
        self.content_settings = content_settings

    async def create_comment(
        self,
        subject_id: SubjectId,
        author: User,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a subject or a reply to another comment.

        Args:
            subject_id: Subject ID
            author: Authoring user
            content: Comment text (trimmed)
            parent_comment_id: Comment replied to (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty/too long or the parent is invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            subject_id=str(subject_id),
            author_id=str(author.id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            content = content.strip()
            max_length = self.content_settings.max_comment_length
            if not content:
                raise ValidationError("Content is required")
            if len(content) > max_length:
                raise ValidationError(
                    f"Comment must be {max_length} characters or less"
                )

            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        subject_id=str(subject_id),
                    )
                    raise ValidationError("Parent comment not found")
                if parent.subject_id != subject_id:
                    logfire.error(
                        "Parent comment does not belong to subject",
                        parent_comment_id=str(parent_comment_id),
                        parent_subject_id=str(parent.subject_id),
                        target_subject_id=str(subject_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this subject"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                subject_id=subject_id,
                author_id=author.id,
                author_username=author.username,
                content=content,
                parent_comment_id=parent_comment_id,
                like_count=0,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                subject_id=str(subject_id),
                author_username=author.username.root,
            )
            return saved

    async def get_comment_thread(
        self,
        subject_id: SubjectId,
        order: CommentSortOrder = CommentSortOrder.NEWEST,
    ) -> list[CommentNode]:
        """Get the reply tree of a subject's comments.

        Args:
            subject_id: Subject ID
            order: Ordering of top-level comments (replies are always oldest first)

        Returns:
            Top-level comment nodes with nested replies
        """
        with logfire.span(
            "comment_service.get_comment_thread",
            subject_id=str(subject_id),
            order=order.value,
        ):
            comments = await self.comment_repository.find_by_subject(subject_id)
            roots = build_comment_tree(comments, order)

            threaded = sum(1 for root in roots for _ in root.walk())
            if threaded < len(comments):
                logfire.info(
                    "Dropped orphaned comments from thread",
                    subject_id=str(subject_id),
                    dropped=len(comments) - threaded,
                )
            logfire.info(
                "Comment thread built",
                subject_id=str(subject_id),
                count=threaded,
                root_count=len(roots),
            )
            return roots

    async def get_comment(
        self, subject_id: SubjectId, comment_id: CommentId
    ) -> Comment:
        """Get a comment that belongs to the given subject.

        Raises:
            NotFoundError: If the comment does not exist on this subject
        """
        with logfire.span(
            "comment_service.get_comment",
            subject_id=str(subject_id),
            comment_id=str(comment_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.subject_id != subject_id:
                logfire.warn(
                    "Comment not found", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def apply_like_delta(self, comment_id: CommentId, delta: int) -> int:
        """Atomically apply a vote delta to the comment's net score.

        Returns:
            New like count
        """
        with logfire.span(
            "comment_service.apply_like_delta", comment_id=str(comment_id), delta=delta
        ):
            like_count = await self.comment_repository.apply_like_delta(
                comment_id, delta
            )
            logfire.info(
                "Comment like count updated",
                comment_id=str(comment_id),
                like_count=like_count,
            )
            return like_count
