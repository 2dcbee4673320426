"""Create subject use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import SubjectService, UserService
from board.domain.value import UserId

from .subject_item import SubjectItem


class CreateSubjectRequest(BaseModel):
    """Create subject request."""

    title: str
    description: str | None = None
    author_id: str  # User ID from authenticated user


class CreateSubjectResponse(BaseModel):
    """Create subject response."""

    subject: SubjectItem


class CreateSubjectUseCase(BaseUseCase):
    """Use case for opening a new discussion subject."""

    def __init__(
        self, subject_service: SubjectService, user_service: UserService
    ) -> None:
        """Initialize create subject use case.

        Args:
            subject_service: Subject domain service
            user_service: User domain service
        """
        self.subject_service = subject_service
        self.user_service = user_service

    async def execute(self, request: CreateSubjectRequest) -> CreateSubjectResponse:
        """Execute create subject flow.

        Steps:
        1. Load the author (username is denormalized onto the subject)
        2. Create subject via subject service

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If title or description is invalid
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        subject = await self.subject_service.create_subject(
            author=author,
            title=request.title,
            description=request.description,
        )
        return CreateSubjectResponse(subject=SubjectItem.from_subject(subject))
