"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, ContentSettings
from board.domain.repository import (
    CommentRepository,
    SubjectRepository,
    UserRepository,
    VoteRepository,
)
from board.domain.service import (
    CommentService,
    JWTService,
    SubjectService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_subject_service(
        self,
        subject_repository: SubjectRepository,
        content_settings: ContentSettings,
    ) -> SubjectService:
        """Provide subject domain service."""
        return SubjectService(
            subject_repository=subject_repository,
            content_settings=content_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        content_settings: ContentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            content_settings=content_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        subject_service: SubjectService,
        comment_service: CommentService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            subject_service=subject_service,
            comment_service=comment_service,
        )
