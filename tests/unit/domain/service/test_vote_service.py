"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from board.domain.error import InvalidActionError, NotFoundError
from board.domain.repository import VoteRepository
from board.domain.service import (
    CommentService,
    SubjectService,
    VoteService,
)
from board.domain.value import (
    CommentId,
    SubjectId,
    UserId,
    VotableType,
    VoteAction,
    VoteState,
    VoteType,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _subject(unit_env):
    subject_service = await unit_env.get(SubjectService)
    return await subject_service.create_subject(make_user(), "Votable subject")


class TestVoteSubject:
    """Tests for VoteService.vote_subject."""

    @pytest.mark.asyncio
    async def test_like_persists_vote_and_count(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        subject = await _subject(unit_env)
        voter = UserId(uuid4())

        # Act
        result = await service.vote_subject(subject.id, voter, VoteAction.LIKE)

        # Assert
        assert result.like_count == 1
        assert result.state == VoteState.LIKED
        assert result.liked and not result.disliked
        vote = await vote_repo.find_by_user_and_votable(
            voter, VotableType.SUBJECT, subject.id
        )
        assert vote is not None
        assert vote.vote_type == VoteType.LIKE

    @pytest.mark.asyncio
    async def test_like_twice_toggles_off(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        subject = await _subject(unit_env)
        voter = UserId(uuid4())
        await service.vote_subject(subject.id, voter, "like")

        # Act
        result = await service.vote_subject(subject.id, voter, "like")

        # Assert
        assert result.like_count == 0
        assert result.state == VoteState.NEUTRAL
        assert (
            await vote_repo.find_by_user_and_votable(
                voter, VotableType.SUBJECT, subject.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_switch_like_to_dislike_moves_two(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        subject = await _subject(unit_env)
        voter = UserId(uuid4())
        await service.vote_subject(subject.id, voter, "like")

        # Act
        result = await service.vote_subject(subject.id, voter, "dislike")

        # Assert
        assert result.delta == -2
        assert result.like_count == -1
        assert result.disliked
        vote = await vote_repo.find_by_user_and_votable(
            voter, VotableType.SUBJECT, subject.id
        )
        assert vote is not None
        assert vote.vote_type == VoteType.DISLIKE

    @pytest.mark.asyncio
    async def test_remove_without_vote_is_noop(self, unit_env):
        service = await unit_env.get(VoteService)
        subject = await _subject(unit_env)

        result = await service.vote_subject(subject.id, UserId(uuid4()), "remove")

        assert result.delta == 0
        assert result.like_count == 0
        assert result.state == VoteState.NEUTRAL

    @pytest.mark.asyncio
    async def test_several_voters(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        subject = await _subject(unit_env)
        alice, bob, carol = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())

        # Act
        await service.vote_subject(subject.id, alice, "like")
        await service.vote_subject(subject.id, bob, "like")
        result = await service.vote_subject(subject.id, carol, "dislike")
        states = {
            voter: (
                await service.get_vote_states(voter, VotableType.SUBJECT, [subject.id])
            )[subject.id]
            for voter in (alice, bob, carol)
        }

        # Assert
        assert result.like_count == 1
        assert states == {
            alice: VoteState.LIKED,
            bob: VoteState.LIKED,
            carol: VoteState.DISLIKED,
        }

    @pytest.mark.asyncio
    async def test_invalid_action(self, unit_env):
        service = await unit_env.get(VoteService)
        subject = await _subject(unit_env)

        with pytest.raises(InvalidActionError):
            await service.vote_subject(subject.id, UserId(uuid4()), "upvote")

    @pytest.mark.asyncio
    async def test_invalid_action_checked_before_lookup(self, unit_env):
        service = await unit_env.get(VoteService)

        with pytest.raises(InvalidActionError):
            await service.vote_subject(SubjectId(uuid4()), UserId(uuid4()), "meh")

    @pytest.mark.asyncio
    async def test_missing_subject(self, unit_env):
        service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await service.vote_subject(SubjectId(uuid4()), UserId(uuid4()), "like")


def _yield_before_read(monkeypatch, vote_repo):
    """Make every vote lookup hand control back to the event loop first."""
    original = vote_repo.find_by_user_and_votable

    async def find_after_yield(*args, **kwargs):
        await asyncio.sleep(0)
        return await original(*args, **kwargs)

    monkeypatch.setattr(vote_repo, "find_by_user_and_votable", find_after_yield)


class TestConcurrentVotes:
    """Tests for overlapping vote requests."""

    @pytest.mark.asyncio
    async def test_same_voter_double_like_toggles_off(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(VoteService)
        subject_service = await unit_env.get(SubjectService)
        vote_repo = await unit_env.get(VoteRepository)
        subject = await _subject(unit_env)
        voter = UserId(uuid4())
        _yield_before_read(monkeypatch, vote_repo)

        # Act
        results = await asyncio.gather(
            service.vote_subject(subject.id, voter, "like"),
            service.vote_subject(subject.id, voter, "like"),
        )

        # Assert
        assert sorted(r.delta for r in results) == [-1, 1]
        assert (await subject_service.get_subject(subject.id)).like_count == 0
        assert (
            await vote_repo.find_by_user_and_votable(
                voter, VotableType.SUBJECT, subject.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_same_voter_triple_like_ends_liked(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(VoteService)
        subject_service = await unit_env.get(SubjectService)
        vote_repo = await unit_env.get(VoteRepository)
        subject = await _subject(unit_env)
        voter = UserId(uuid4())
        _yield_before_read(monkeypatch, vote_repo)

        # Act
        await asyncio.gather(
            *(service.vote_subject(subject.id, voter, "like") for _ in range(3))
        )

        # Assert
        assert (await subject_service.get_subject(subject.id)).like_count == 1
        vote = await vote_repo.find_by_user_and_votable(
            voter, VotableType.SUBJECT, subject.id
        )
        assert vote is not None
        assert vote.vote_type == VoteType.LIKE

    @pytest.mark.asyncio
    async def test_like_and_dislike_race_matches_stored_vote(
        self, unit_env, monkeypatch
    ):
        # Arrange
        service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        vote_repo = await unit_env.get(VoteRepository)
        subject = await _subject(unit_env)
        comment = await comment_service.create_comment(subject.id, make_user(), "Hi")
        voter = UserId(uuid4())
        _yield_before_read(monkeypatch, vote_repo)

        # Act
        await asyncio.gather(
            service.vote_comment(subject.id, comment.id, voter, "like"),
            service.vote_comment(subject.id, comment.id, voter, "dislike"),
        )

        # Assert
        stored = await comment_service.get_comment(subject.id, comment.id)
        vote = await vote_repo.find_by_user_and_votable(
            voter, VotableType.COMMENT, comment.id
        )
        assert vote is not None
        assert vote.vote_type == VoteType.DISLIKE
        assert stored.like_count == -1

    @pytest.mark.asyncio
    async def test_different_voters_all_count(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(VoteService)
        subject_service = await unit_env.get(SubjectService)
        vote_repo = await unit_env.get(VoteRepository)
        subject = await _subject(unit_env)
        voters = [UserId(uuid4()) for _ in range(3)]
        _yield_before_read(monkeypatch, vote_repo)

        # Act
        await asyncio.gather(
            *(service.vote_subject(subject.id, voter, "like") for voter in voters)
        )

        # Assert
        assert (await subject_service.get_subject(subject.id)).like_count == 3


class TestVoteComment:
    """Tests for VoteService.vote_comment."""

    @pytest.mark.asyncio
    async def test_dislike_comment(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        subject = await _subject(unit_env)
        comment = await comment_service.create_comment(subject.id, make_user(), "Hi")

        # Act
        result = await service.vote_comment(
            subject.id, comment.id, UserId(uuid4()), VoteAction.DISLIKE
        )

        # Assert
        assert result.like_count == -1
        assert result.disliked
        subject_service = await unit_env.get(SubjectService)
        assert (await subject_service.get_subject(subject.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_comment_vote_is_separate_from_subject_vote(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        subject = await _subject(unit_env)
        comment = await comment_service.create_comment(subject.id, make_user(), "Hi")
        voter = UserId(uuid4())
        await service.vote_subject(subject.id, voter, "like")

        # Act
        result = await service.vote_comment(subject.id, comment.id, voter, "like")

        # Assert
        assert result.like_count == 1
        assert result.liked

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        service = await unit_env.get(VoteService)
        subject = await _subject(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await service.vote_comment(
                subject.id, CommentId(uuid4()), UserId(uuid4()), "like"
            )

        assert exc_info.value.resource == "Comment"


class TestGetVoteStates:
    """Tests for VoteService.get_vote_states."""

    @pytest.mark.asyncio
    async def test_batch_states(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        liked, disliked, untouched = (
            await _subject(unit_env),
            await _subject(unit_env),
            await _subject(unit_env),
        )
        voter = UserId(uuid4())
        await service.vote_subject(liked.id, voter, "like")
        await service.vote_subject(disliked.id, voter, "dislike")

        # Act
        states = await service.get_vote_states(
            voter, VotableType.SUBJECT, [liked.id, disliked.id, untouched.id]
        )

        # Assert
        assert states == {
            liked.id: VoteState.LIKED,
            disliked.id: VoteState.DISLIKED,
            untouched.id: VoteState.NEUTRAL,
        }

    @pytest.mark.asyncio
    async def test_empty_ids(self, unit_env):
        service = await unit_env.get(VoteService)

        assert await service.get_vote_states(UserId(uuid4()), VotableType.SUBJECT, []) == {}
