"""List subjects use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import SubjectService, VoteService
from board.domain.value import UserId, VotableType, VoteState

from .subject_item import SubjectItem


class ListSubjectsRequest(BaseModel):
    """List subjects request."""

    user_id: str | None = None  # Current user ID (if authenticated)


class ListSubjectsResponse(BaseModel):
    """List subjects response."""

    subjects: list[SubjectItem]


class ListSubjectsUseCase(BaseUseCase):
    """Use case for listing all subjects, newest first."""

    def __init__(
        self, subject_service: SubjectService, vote_service: VoteService
    ) -> None:
        """Initialize list subjects use case.

        Args:
            subject_service: Subject domain service
            vote_service: Vote domain service (caller's vote state)
        """
        self.subject_service = subject_service
        self.vote_service = vote_service

    async def execute(self, request: ListSubjectsRequest) -> ListSubjectsResponse:
        """Execute list subjects flow.

        Anonymous callers see every subject as neutral.
        """
        subjects = await self.subject_service.list_subjects()

        states: dict[UUID, VoteState] = {}
        if request.user_id and subjects:
            states = await self.vote_service.get_vote_states(
                user_id=UserId(UUID(request.user_id)),
                votable_type=VotableType.SUBJECT,
                votable_ids=[subject.id for subject in subjects],
            )

        return ListSubjectsResponse(
            subjects=[
                SubjectItem.from_subject(
                    subject, states.get(subject.id, VoteState.NEUTRAL)
                )
                for subject in subjects
            ]
        )
