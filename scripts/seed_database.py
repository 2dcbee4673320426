#!/usr/bin/env python3
"""Populate the database with demo users, subjects and threaded comments.

Existing rows are removed first so the script can be re-run for a clean slate.

Demo logins:
    john@example.com / password123
    jane@example.com / password123
"""

import asyncio
import sys
from uuid import UUID

import logfire
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from board.config import Settings
from board.domain.service import SubjectService, UserService, VoteService
from board.domain.value import CommentId, VoteAction
from board.persistence.tables import (
    comments_table,
    subjects_table,
    users_table,
    votes_table,
)
from board.util.di.container import create_container
from board.util.observability import configure_logfire

DEMO_PASSWORD = "password123"


async def clear_database(session: AsyncSession) -> None:
    """Delete all rows, children first."""
    for table in (votes_table, comments_table, subjects_table, users_table):
        await session.execute(delete(table))


async def seed() -> None:
    container = create_container()
    try:
        # One request scope, so everything commits in a single transaction
        async with container() as request:
            await clear_database(await request.get(AsyncSession))

            users = await request.get(UserService)
            subjects = await request.get(SubjectService)
            votes = await request.get(VoteService)
            create_comment = await request.get(CreateCommentUseCase)

            john = await users.register(
                "john_doe", "john@example.com", DEMO_PASSWORD, phone="+1234567890"
            )
            jane = await users.register(
                "jane_smith", "jane@example.com", DEMO_PASSWORD, phone="+0987654321"
            )

            welcome = await subjects.create_subject(
                john,
                "Welcome to the Discussion Board",
                "This is our first discussion topic. Feel free to share your "
                "thoughts and engage with others!",
            )
            practices = await subjects.create_subject(
                jane,
                "Best Practices for Online Discussions",
                "Let's discuss how to maintain productive and respectful "
                "conversations in online forums.",
            )

            greeting = await create_comment.execute(
                CreateCommentRequest(
                    subject_id=str(welcome.id),
                    author_id=str(jane.id),
                    content=(
                        "Great to see this discussion board up and running! "
                        "Looking forward to engaging conversations."
                    ),
                )
            )
            await create_comment.execute(
                CreateCommentRequest(
                    subject_id=str(welcome.id),
                    author_id=str(john.id),
                    content="Thanks Jane! Glad to have you here.",
                    parent_comment_id=greeting.id,
                )
            )
            await create_comment.execute(
                CreateCommentRequest(
                    subject_id=str(practices.id),
                    author_id=str(john.id),
                    content=(
                        "I think active listening and asking clarifying "
                        "questions are key to good online discussions."
                    ),
                )
            )

            await votes.vote_subject(welcome.id, jane.id, VoteAction.LIKE)
            await votes.vote_subject(practices.id, john.id, VoteAction.LIKE)
            await votes.vote_comment(
                welcome.id, CommentId(UUID(greeting.id)), john.id, VoteAction.LIKE
            )

            logfire.info("Database seeded", users=2, subjects=2, comments=3)
    finally:
        await container.close()


def main() -> int:
    """Seed the database and log any errors to Logfire."""
    configure_logfire(Settings())

    try:
        asyncio.run(seed())
        return 0
    except Exception as e:
        logfire.error(
            "Database seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
