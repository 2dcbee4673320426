"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .subject import InMemorySubjectRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemorySubjectRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
