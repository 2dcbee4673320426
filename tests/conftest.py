"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta
from uuid import uuid4

# Fast bcrypt and http cookies for every Settings() built during tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402

from board.domain.model import Comment, Subject, User  # noqa: E402
from board.domain.value import (  # noqa: E402
    CommentId,
    Email,
    SubjectId,
    UserId,
    Username,
)

logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Timestamp a number of minutes after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "alice") -> User:
    """Helper function to build a user without registering it.

    The password hash is not a valid bcrypt hash, so the user cannot log in.
    """
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(f"{username}@example.com"),
        password_hash="not-a-bcrypt-hash",
    )


def make_subject(author: User | None = None, title: str = "Test Subject") -> Subject:
    """Helper function to build a subject with an empty tally."""
    author = author or make_user()
    return Subject(
        id=SubjectId(uuid4()),
        title=title,
        author_id=author.id,
        author_username=author.username,
    )


def make_comment(
    subject_id: SubjectId | None = None,
    parent_comment_id: CommentId | None = None,
    created_at: datetime = BASE_TIME,
    comment_id: CommentId | None = None,
    content: str = "Test comment",
) -> Comment:
    """Helper function to build a comment created at a given time."""
    return Comment(
        id=comment_id or CommentId(uuid4()),
        subject_id=subject_id or SubjectId(uuid4()),
        author_id=UserId(uuid4()),
        author_username=Username("commenter"),
        content=content,
        parent_comment_id=parent_comment_id,
        created_at=created_at,
        updated_at=created_at,
    )
