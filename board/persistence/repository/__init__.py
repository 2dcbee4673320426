"""PostgreSQL repository implementations."""

from board.persistence.repository.comment import PostgresCommentRepository
from board.persistence.repository.subject import PostgresSubjectRepository
from board.persistence.repository.user import PostgresUserRepository
from board.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSubjectRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
