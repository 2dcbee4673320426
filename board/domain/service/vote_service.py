"""Vote domain service."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

import logfire

from board.domain.model.vote import Vote
from board.domain.repository import VoteRepository
from board.domain.value import (
    CommentId,
    SubjectId,
    UserId,
    VotableType,
    VoteAction,
    VoteId,
    VoteState,
    VoteType,
)

from .base import Service
from .comment_service import CommentService
from .subject_service import SubjectService
from .vote_engine import VoteMembership, apply_vote, parse_action


@dataclass(frozen=True)
class VoteResult:
    """Persisted outcome of a vote action."""

    like_count: int
    state: VoteState
    delta: int

    @property
    def liked(self) -> bool:
        return self.state == VoteState.LIKED

    @property
    def disliked(self) -> bool:
        return self.state == VoteState.DISLIKED


class VoteService(Service):
    """Domain service for like/dislike votes on subjects and comments."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        subject_service: SubjectService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            subject_service: Subject domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.subject_service = subject_service
        self.comment_service = comment_service

    async def vote_subject(
        self, subject_id: SubjectId, user_id: UserId, action: VoteAction | str
    ) -> VoteResult:
        """Like, dislike or clear a vote on a subject.

        Args:
            subject_id: Subject ID
            user_id: Voting user
            action: like, dislike or remove

        Returns:
            New like count and the voter's state

        Raises:
            InvalidActionError: If the action is not recognised
            NotFoundError: If the subject does not exist
        """
        with logfire.span(
            "vote_service.vote_subject",
            subject_id=str(subject_id),
            user_id=str(user_id),
            action=str(action),
        ):
            vote_action = parse_action(action)
            subject = await self.subject_service.get_subject(subject_id)
            return await self._apply(
                votable_type=VotableType.SUBJECT,
                votable_id=subject.id,
                read_count=lambda: self._subject_like_count(subject.id),
                user_id=user_id,
                action=vote_action,
                apply_delta=lambda delta: self.subject_service.apply_like_delta(
                    subject.id, delta
                ),
            )

    async def vote_comment(
        self,
        subject_id: SubjectId,
        comment_id: CommentId,
        user_id: UserId,
        action: VoteAction | str,
    ) -> VoteResult:
        """Like, dislike or clear a vote on a comment of a subject.

        Raises:
            InvalidActionError: If the action is not recognised
            NotFoundError: If the comment does not exist on the subject
        """
        with logfire.span(
            "vote_service.vote_comment",
            subject_id=str(subject_id),
            comment_id=str(comment_id),
            user_id=str(user_id),
            action=str(action),
        ):
            vote_action = parse_action(action)
            comment = await self.comment_service.get_comment(subject_id, comment_id)
            return await self._apply(
                votable_type=VotableType.COMMENT,
                votable_id=comment.id,
                read_count=lambda: self._comment_like_count(subject_id, comment.id),
                user_id=user_id,
                action=vote_action,
                apply_delta=lambda delta: self.comment_service.apply_like_delta(
                    comment.id, delta
                ),
            )

    async def _apply(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        read_count: Callable[[], Awaitable[int]],
        user_id: UserId,
        action: VoteAction,
        apply_delta: Callable[[int], Awaitable[int]],
    ) -> VoteResult:
        """Run the vote engine for one voter and persist its outcome.

        Only the acting voter's row is loaded: the engine's transition depends
        solely on that voter's membership. The read, the row write and the
        delta all happen under the voter's lock on the item.
        """
        async with self.vote_repository.lock(user_id, votable_type, votable_id):
            existing = await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )
            membership = VoteMembership.from_votes([existing] if existing else [])
            outcome = apply_vote(membership, user_id, action)

            if outcome.state == VoteState.NEUTRAL:
                if existing:
                    await self.vote_repository.delete_by_user_and_votable(
                        user_id, votable_type, votable_id
                    )
            else:
                now = datetime.now()
                vote_type = (
                    VoteType.LIKE
                    if outcome.state == VoteState.LIKED
                    else VoteType.DISLIKE
                )
                await self.vote_repository.upsert(
                    Vote(
                        id=existing.id if existing else VoteId(uuid4()),
                        user_id=user_id,
                        votable_type=votable_type,
                        votable_id=votable_id,
                        vote_type=vote_type,
                        created_at=existing.created_at if existing else now,
                        updated_at=now,
                    )
                )

            if outcome.delta:
                like_count = await apply_delta(outcome.delta)
            else:
                like_count = await read_count()

        logfire.info(
            "Vote applied",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            action=action.value,
            state=outcome.state.value,
            delta=outcome.delta,
            like_count=like_count,
        )
        return VoteResult(like_count=like_count, state=outcome.state, delta=outcome.delta)

    async def _subject_like_count(self, subject_id: SubjectId) -> int:
        subject = await self.subject_service.get_subject(subject_id)
        return subject.like_count

    async def _comment_like_count(
        self, subject_id: SubjectId, comment_id: CommentId
    ) -> int:
        comment = await self.comment_service.get_comment(subject_id, comment_id)
        return comment.like_count

    async def get_vote_states(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, VoteState]:
        """Get a user's vote state on several items at once.

        Args:
            user_id: User ID
            votable_type: Type of the items
            votable_ids: Item IDs

        Returns:
            Mapping of every requested ID to the user's state (neutral if no vote)
        """
        if not votable_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_votables(
            user_id=user_id,
            votable_type=votable_type,
            votable_ids=votable_ids,
        )
        by_id = {UUID(str(vote.votable_id)): vote.vote_type.state for vote in votes}
        return {
            vid: by_id.get(UUID(str(vid)), VoteState.NEUTRAL) for vid in votable_ids
        }

