"""Domain model entities for the discussion board."""

from board.domain.model.comment import Comment
from board.domain.model.subject import Subject
from board.domain.model.user import User
from board.domain.model.vote import Vote

__all__ = [
    "User",
    "Subject",
    "Comment",
    "Vote",
]
