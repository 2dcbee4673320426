"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentNode, CommentService, SubjectService, VoteService
from board.domain.value import (
    CommentSortOrder,
    SubjectId,
    UserId,
    VotableType,
    VoteState,
)


class CommentItem(BaseModel):
    """Comment in a thread, with its replies nested."""

    id: str
    subject_id: str
    author_id: str
    author_username: str
    content: str
    parent_comment_id: str | None
    like_count: int
    user_liked: bool
    user_disliked: bool
    created_at: datetime
    updated_at: datetime
    replies: list["CommentItem"] = []


CommentItem.model_rebuild()


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    subject_id: str  # UUID string
    order: CommentSortOrder = CommentSortOrder.NEWEST
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    subject_id: str
    order: CommentSortOrder
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting the comment thread of a subject."""

    def __init__(
        self,
        subject_service: SubjectService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            subject_service: Subject domain service
            comment_service: Comment domain service
            vote_service: Vote service for checking user votes
        """
        self.subject_service = subject_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments follow the requested order; replies at every
        depth are oldest first.

        Raises:
            NotFoundError: If the subject does not exist
        """
        subject_id = SubjectId(UUID(request.subject_id))
        await self.subject_service.get_subject(subject_id)

        roots = await self.comment_service.get_comment_thread(
            subject_id=subject_id, order=request.order
        )
        threaded = [node.comment.id for root in roots for node in root.walk()]

        # Batch query for the caller's votes on every comment in the thread
        states: dict[UUID, VoteState] = {}
        if request.user_id and threaded:
            states = await self.vote_service.get_vote_states(
                user_id=UserId(UUID(request.user_id)),
                votable_type=VotableType.COMMENT,
                votable_ids=threaded,
            )

        return GetCommentsResponse(
            subject_id=request.subject_id,
            order=request.order,
            comments=[self._to_item(root, states) for root in roots],
            total=len(threaded),
        )

    def _to_item(
        self, node: CommentNode, states: dict[UUID, VoteState]
    ) -> CommentItem:
        comment = node.comment
        state = states.get(comment.id, VoteState.NEUTRAL)
        return CommentItem(
            id=str(comment.id),
            subject_id=str(comment.subject_id),
            author_id=str(comment.author_id),
            author_username=comment.author_username.root,
            content=comment.content,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            like_count=comment.like_count,
            user_liked=state == VoteState.LIKED,
            user_disliked=state == VoteState.DISLIKED,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=[self._to_item(reply, states) for reply in node.replies],
        )
