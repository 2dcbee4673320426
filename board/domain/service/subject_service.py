"""Subject domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from board.config import ContentSettings
from board.domain.error import NotFoundError, ValidationError
from board.domain.model import Subject, User
from board.domain.repository import SubjectRepository
from board.domain.value import SubjectId

from .base import Service


class SubjectService(Service):
    """Domain service for subject operations."""

    def __init__(
        self,
        subject_repository: SubjectRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize subject service.

        Args:
            subject_repository: Subject repository
            content_settings: Content length limits
        """
        self.subject_repository = subject_repository
        self.content_settings = content_settings

    async def create_subject(
        self, author: User, title: str, description: str | None = None
    ) -> Subject:
        """Create a new subject with an empty vote tally.

        Args:
            author: Authoring user
            title: Subject title (trimmed, required)
            description: Optional description (trimmed)

        Returns:
            Created subject

        Raises:
            ValidationError: If title or description is empty or too long
        """
        with logfire.span(
            "subject_service.create_subject", author_id=str(author.id)
        ):
            title = title.strip()
            description = (description or "").strip()
            limits = self.content_settings

            if not title:
                raise ValidationError("Title is required")
            if len(title) > limits.max_title_length:
                raise ValidationError(
                    f"Title must be {limits.max_title_length} characters or less"
                )
            if len(description) > limits.max_description_length:
                raise ValidationError(
                    f"Description must be {limits.max_description_length} characters or less"
                )

            now = datetime.now()
            subject = Subject(
                id=SubjectId(uuid4()),
                title=title,
                description=description,
                author_id=author.id,
                author_username=author.username,
                like_count=0,
                comment_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.subject_repository.save(subject)
            logfire.info(
                "Subject created",
                subject_id=str(saved.id),
                author_username=author.username.root,
            )
            return saved

    async def list_subjects(self) -> list[Subject]:
        """List all subjects, newest first."""
        with logfire.span("subject_service.list_subjects"):
            subjects = await self.subject_repository.find_all()
            logfire.info("Subjects listed", count=len(subjects))
            return subjects

    async def get_subject(self, subject_id: SubjectId) -> Subject:
        """Get a subject by ID.

        Raises:
            NotFoundError: If the subject does not exist
        """
        with logfire.span("subject_service.get_subject", subject_id=str(subject_id)):
            subject = await self.subject_repository.find_by_id(subject_id)
            if not subject:
                logfire.warn("Subject not found", subject_id=str(subject_id))
                raise NotFoundError("Subject", str(subject_id))
            return subject

    async def apply_like_delta(self, subject_id: SubjectId, delta: int) -> int:
        """Atomically apply a vote delta to the subject's net score.

        Args:
            subject_id: Subject ID
            delta: Net score change from the vote engine

        Returns:
            New like count
        """
        with logfire.span(
            "subject_service.apply_like_delta", subject_id=str(subject_id), delta=delta
        ):
            like_count = await self.subject_repository.apply_like_delta(
                subject_id, delta
            )
            logfire.info(
                "Subject like count updated",
                subject_id=str(subject_id),
                like_count=like_count,
            )
            return like_count

    async def increment_comment_count(self, subject_id: SubjectId) -> None:
        """Atomically increment the subject's comment count."""
        with logfire.span(
            "subject_service.increment_comment_count", subject_id=str(subject_id)
        ):
            await self.subject_repository.increment_comment_count(subject_id)
