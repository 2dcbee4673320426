"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from board.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from board.application.usecase.subject import (
    CreateSubjectUseCase,
    GetSubjectUseCase,
    ListSubjectsUseCase,
)
from board.application.usecase.vote import VoteUseCase
from board.domain.service import (
    CommentService,
    JWTService,
    SubjectService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Subject use cases
    @provide(scope=Scope.REQUEST)
    def get_create_subject_use_case(
        self, subject_service: SubjectService, user_service: UserService
    ) -> CreateSubjectUseCase:
        """Provide create subject use case."""
        return CreateSubjectUseCase(
            subject_service=subject_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_subjects_use_case(
        self, subject_service: SubjectService, vote_service: VoteService
    ) -> ListSubjectsUseCase:
        """Provide list subjects use case."""
        return ListSubjectsUseCase(
            subject_service=subject_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_subject_use_case(
        self, subject_service: SubjectService, vote_service: VoteService
    ) -> GetSubjectUseCase:
        """Provide get subject use case."""
        return GetSubjectUseCase(
            subject_service=subject_service, vote_service=vote_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        subject_service: SubjectService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            subject_service=subject_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        subject_service: SubjectService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            subject_service=subject_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(self, vote_service: VoteService) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(vote_service=vote_service)
