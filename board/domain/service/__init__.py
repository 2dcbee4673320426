"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .subject_service import SubjectService
from .thread_builder import CommentNode, build_comment_tree
from .user_service import UserService
from .vote_engine import VoteMembership, VoteOutcome, apply_vote
from .vote_service import VoteResult, VoteService

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "Service",
    "SubjectService",
    "UserService",
    "VoteMembership",
    "VoteOutcome",
    "VoteResult",
    "VoteService",
    "apply_vote",
    "build_comment_tree",
]
