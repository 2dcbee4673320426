"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService, SubjectService, UserService
from board.domain.value import CommentId, SubjectId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    subject_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_comment_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    id: str
    subject_id: str
    author_id: str
    author_username: str
    content: str
    parent_comment_id: str | None
    like_count: int
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a subject or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        subject_service: SubjectService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            subject_service: Subject domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.subject_service = subject_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify subject exists via subject service
        2. Load the author
        3. Create comment via comment service (validates parent if replying)
        4. Update subject's comment count

        Raises:
            NotFoundError: If the subject or author does not exist
            ValidationError: If content is invalid or the parent is not on the subject
        """
        subject_id = SubjectId(UUID(request.subject_id))
        subject = await self.subject_service.get_subject(subject_id)
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        parent_comment_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )
        comment = await self.comment_service.create_comment(
            subject_id=subject.id,
            author=author,
            content=request.content,
            parent_comment_id=parent_comment_id,
        )

        await self.subject_service.increment_comment_count(subject.id)

        return CreateCommentResponse(
            id=str(comment.id),
            subject_id=str(comment.subject_id),
            author_id=str(comment.author_id),
            author_username=comment.author_username.root,
            content=comment.content,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            like_count=comment.like_count,
            created_at=comment.created_at,
        )
