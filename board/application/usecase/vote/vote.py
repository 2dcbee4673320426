"""Vote use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from board.application.usecase.base import BaseUseCase
from board.domain.service import VoteService
from board.domain.value import CommentId, SubjectId, UserId, VotableType


class VoteRequest(BaseModel):
    """Vote request.

    ``action`` stays a plain string so unknown actions reach the vote engine
    and are reported as an invalid action rather than a schema error.
    """

    votable_type: VotableType
    subject_id: str  # UUID string
    comment_id: str | None = None  # UUID string, required for comment votes
    user_id: str  # User ID from authenticated user
    action: str

    @model_validator(mode="after")
    def check_comment_id(self) -> "VoteRequest":
        if self.votable_type == VotableType.COMMENT and not self.comment_id:
            raise ValueError("comment_id is required for comment votes")
        return self


class VoteResponse(BaseModel):
    """Vote response."""

    success: bool
    like_count: int
    user_liked: bool
    user_disliked: bool


class VoteUseCase(BaseUseCase):
    """Use case for liking, disliking or clearing a vote on a subject or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            InvalidActionError: If the action is not like, dislike or remove
            NotFoundError: If the subject or comment does not exist
        """
        user_id = UserId(UUID(request.user_id))
        subject_id = SubjectId(UUID(request.subject_id))

        if request.votable_type == VotableType.SUBJECT:
            result = await self.vote_service.vote_subject(
                subject_id, user_id, request.action
            )
        else:  # VotableType.COMMENT
            comment_id = CommentId(UUID(str(request.comment_id)))
            result = await self.vote_service.vote_comment(
                subject_id, comment_id, user_id, request.action
            )

        return VoteResponse(
            success=True,
            like_count=result.like_count,
            user_liked=result.liked,
            user_disliked=result.disliked,
        )
