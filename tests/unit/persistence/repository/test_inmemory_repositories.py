"""Unit tests for the in-memory repositories used by the test container."""

import asyncio
from datetime import datetime
from uuid import uuid4

import pytest

from board.domain.error import NotFoundError
from board.domain.model import Vote
from board.domain.value import (
    Email,
    SubjectId,
    UserId,
    Username,
    VotableType,
    VoteId,
    VoteType,
)
from board.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemorySubjectRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_comment, make_subject, make_user


def _vote(user_id: UserId, votable_id, vote_type: VoteType = VoteType.LIKE) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        votable_type=VotableType.COMMENT,
        votable_id=votable_id,
        vote_type=vote_type,
    )


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_find_by_email_or_username(self):
        # Arrange
        repo = InMemoryUserRepository()
        user = await repo.save(make_user("alice"))

        # Act / Assert
        assert await repo.find_by_email(Email("alice@example.com")) == user
        assert (
            await repo.find_by_email_or_username(
                Email("other@example.com"), Username("alice")
            )
            == user
        )
        assert (
            await repo.find_by_email_or_username(
                Email("other@example.com"), Username("other")
            )
            is None
        )


class TestInMemorySubjectRepository:
    """Tests for InMemorySubjectRepository."""

    @pytest.mark.asyncio
    async def test_apply_like_delta_missing(self):
        repo = InMemorySubjectRepository()

        with pytest.raises(NotFoundError):
            await repo.apply_like_delta(SubjectId(uuid4()), 1)

    @pytest.mark.asyncio
    async def test_apply_like_delta_updates_timestamp(self):
        # Arrange
        repo = InMemorySubjectRepository()
        subject = make_subject().model_copy(
            update={"updated_at": datetime(2000, 1, 1)}
        )
        await repo.save(subject)

        # Act
        like_count = await repo.apply_like_delta(subject.id, 2)

        # Assert
        stored = await repo.find_by_id(subject.id)
        assert like_count == 2 == stored.like_count
        assert stored.updated_at > subject.updated_at


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_find_by_subject_filters(self):
        # Arrange
        repo = InMemoryCommentRepository()
        mine = await repo.save(make_comment())
        await repo.save(make_comment())

        # Act
        found = await repo.find_by_subject(mine.subject_id)

        # Assert
        assert found == [mine]


class TestInMemoryVoteRepository:
    """Tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_upsert_switches_type_in_place(self):
        # Arrange
        repo = InMemoryVoteRepository()
        user_id, votable_id = UserId(uuid4()), uuid4()
        first = await repo.upsert(_vote(user_id, votable_id, VoteType.LIKE))

        # Act
        second = await repo.upsert(_vote(user_id, votable_id, VoteType.DISLIKE))

        # Assert
        assert second.id == first.id
        assert second.vote_type == VoteType.DISLIKE
        assert (
            await repo.find_by_user_and_votable(user_id, VotableType.COMMENT, votable_id)
            == second
        )

    @pytest.mark.asyncio
    async def test_lock_serializes_same_user_and_item(self):
        # Arrange
        repo = InMemoryVoteRepository()
        user_id, votable_id = UserId(uuid4()), uuid4()
        events = []

        async def hold(name):
            async with repo.lock(user_id, VotableType.COMMENT, votable_id):
                events.append(f"{name} in")
                await asyncio.sleep(0)
                events.append(f"{name} out")

        # Act
        await asyncio.gather(hold("a"), hold("b"))

        # Assert
        assert events == ["a in", "a out", "b in", "b out"]

    @pytest.mark.asyncio
    async def test_lock_is_per_user(self):
        # Arrange
        repo = InMemoryVoteRepository()
        votable_id = uuid4()
        events = []

        async def hold(name):
            async with repo.lock(UserId(uuid4()), VotableType.COMMENT, votable_id):
                events.append(f"{name} in")
                await asyncio.sleep(0)
                events.append(f"{name} out")

        # Act
        await asyncio.gather(hold("a"), hold("b"))

        # Assert
        assert events == ["a in", "b in", "a out", "b out"]

    @pytest.mark.asyncio
    async def test_delete(self):
        # Arrange
        repo = InMemoryVoteRepository()
        user_id, votable_id = UserId(uuid4()), uuid4()
        await repo.upsert(_vote(user_id, votable_id))

        # Act
        deleted = await repo.delete_by_user_and_votable(
            user_id, VotableType.COMMENT, votable_id
        )
        deleted_again = await repo.delete_by_user_and_votable(
            user_id, VotableType.COMMENT, votable_id
        )

        # Assert
        assert deleted is True
        assert deleted_again is False

    @pytest.mark.asyncio
    async def test_batch_lookup_is_scoped_to_user_and_type(self):
        # Arrange
        repo = InMemoryVoteRepository()
        user_id, other = UserId(uuid4()), UserId(uuid4())
        a, b = uuid4(), uuid4()
        await repo.upsert(_vote(user_id, a))
        await repo.upsert(_vote(other, b))

        # Act
        votes = await repo.find_by_user_and_votables(
            user_id, VotableType.COMMENT, [a, b]
        )
        subject_votes = await repo.find_by_user_and_votables(
            user_id, VotableType.SUBJECT, [a, b]
        )

        # Assert
        assert [v.votable_id for v in votes] == [a]
        assert subject_votes == []
        assert await repo.find_by_user_and_votables(user_id, VotableType.COMMENT, []) == []
