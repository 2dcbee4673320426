"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped manually
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import Comment, Subject, User, Vote
from board.domain.value import (
    CommentId,
    Email,
    PhoneNumber,
    SubjectId,
    UserId,
    Username,
    VotableType,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        phone=PhoneNumber(row["phone"]) if row.get("phone") else None,
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_subject(row: Dict[str, Any]) -> Subject:
    """Convert database row to Subject domain model."""
    return Subject(
        id=SubjectId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description") or "",
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        like_count=row["like_count"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def subject_to_dict(subject: Subject) -> Dict[str, Any]:
    """Convert Subject domain model to database dict."""
    return subject.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent = row.get("parent_comment_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        subject_id=SubjectId(_uuid(row["subject_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        content=row["content"],
        parent_comment_id=CommentId(_uuid(parent)) if parent else None,
        like_count=row["like_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    vote_dict = vote.model_dump()
    vote_dict["votable_type"] = vote.votable_type.value
    vote_dict["vote_type"] = vote.vote_type.value
    return vote_dict
