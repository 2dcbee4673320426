"""Domain value objects for the discussion board."""

from board.domain.value.identifiers import (
    CommentId,
    SubjectId,
    UserId,
    VoteId,
)
from board.domain.value.types import (
    CommentSortOrder,
    Email,
    PhoneNumber,
    Username,
    VotableType,
    VoteAction,
    VoteState,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "SubjectId",
    "CommentId",
    "VoteId",
    # Types
    "CommentSortOrder",
    "Email",
    "PhoneNumber",
    "Username",
    "VotableType",
    "VoteAction",
    "VoteState",
    "VoteType",
]
