"""Get subject use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import SubjectService, VoteService
from board.domain.value import SubjectId, UserId, VotableType, VoteState

from .subject_item import SubjectItem


class GetSubjectRequest(BaseModel):
    """Get subject request."""

    subject_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetSubjectResponse(BaseModel):
    """Get subject response."""

    subject: SubjectItem


class GetSubjectUseCase(BaseUseCase):
    """Use case for retrieving a single subject."""

    def __init__(
        self, subject_service: SubjectService, vote_service: VoteService
    ) -> None:
        """Initialize get subject use case.

        Args:
            subject_service: Subject domain service
            vote_service: Vote domain service
        """
        self.subject_service = subject_service
        self.vote_service = vote_service

    async def execute(self, request: GetSubjectRequest) -> GetSubjectResponse:
        """Execute get subject flow.

        Raises:
            NotFoundError: If the subject does not exist
        """
        subject = await self.subject_service.get_subject(
            SubjectId(UUID(request.subject_id))
        )

        state = VoteState.NEUTRAL
        if request.user_id:
            states = await self.vote_service.get_vote_states(
                user_id=UserId(UUID(request.user_id)),
                votable_type=VotableType.SUBJECT,
                votable_ids=[subject.id],
            )
            state = states[subject.id]

        return GetSubjectResponse(subject=SubjectItem.from_subject(subject, state))
