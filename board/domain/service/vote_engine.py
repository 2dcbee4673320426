"""Like/dislike vote state machine.

Each voter is in one of three states towards a votable item: neutral, liked
or disliked. Like and dislike toggle: repeating the action a voter already
holds returns them to neutral. Switching directly between liked and disliked
moves the net score by two in a single step.

The engine is a pure function. It returns the score delta rather than an
absolute count so the persistence layer can apply it as one atomic increment.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from board.domain.error import InvalidActionError, ValidationError
from board.domain.model.vote import Vote
from board.domain.value import UserId, VoteAction, VoteState, VoteType

# Contribution of a single voter's state to the net score
_SCORE = {
    VoteState.NEUTRAL: 0,
    VoteState.LIKED: 1,
    VoteState.DISLIKED: -1,
}


@dataclass(frozen=True)
class VoteMembership:
    """Voters who currently like or dislike an item.

    A voter appears in at most one of the two sets.
    """

    liked_by: frozenset[UserId] = frozenset()
    disliked_by: frozenset[UserId] = frozenset()

    @classmethod
    def from_votes(cls, votes: Iterable[Vote]) -> "VoteMembership":
        """Build membership from stored votes."""
        liked: set[UserId] = set()
        disliked: set[UserId] = set()
        for vote in votes:
            if vote.vote_type == VoteType.LIKE:
                liked.add(vote.user_id)
            else:
                disliked.add(vote.user_id)
        return cls(liked_by=frozenset(liked), disliked_by=frozenset(disliked))

    @property
    def net_score(self) -> int:
        """Likes minus dislikes."""
        return len(self.liked_by) - len(self.disliked_by)

    def state_of(self, voter: UserId) -> VoteState:
        """Return the voter's current state."""
        if voter in self.liked_by:
            return VoteState.LIKED
        if voter in self.disliked_by:
            return VoteState.DISLIKED
        return VoteState.NEUTRAL


@dataclass(frozen=True)
class VoteOutcome:
    """Result of applying a vote action."""

    membership: VoteMembership
    state: VoteState
    delta: int

    @property
    def liked(self) -> bool:
        return self.state == VoteState.LIKED

    @property
    def disliked(self) -> bool:
        return self.state == VoteState.DISLIKED


def parse_action(action: VoteAction | str) -> VoteAction:
    """Coerce an action string into a VoteAction.

    Raises:
        InvalidActionError: If the action is not like, dislike or remove
    """
    if isinstance(action, VoteAction):
        return action
    try:
        return VoteAction(action)
    except ValueError:
        raise InvalidActionError(action)


def next_state(current: VoteState, action: VoteAction) -> VoteState:
    """Transition function of the per-voter state machine."""
    if action == VoteAction.LIKE:
        return VoteState.NEUTRAL if current == VoteState.LIKED else VoteState.LIKED
    if action == VoteAction.DISLIKE:
        return (
            VoteState.NEUTRAL if current == VoteState.DISLIKED else VoteState.DISLIKED
        )
    return VoteState.NEUTRAL


def apply_vote(
    current: VoteMembership, voter: UserId, action: VoteAction | str
) -> VoteOutcome:
    """Apply a vote action for one voter.

    Args:
        current: Current membership of the item
        voter: Acting voter
        action: like, dislike or remove

    Returns:
        New membership, the voter's resulting state and the net score delta

    Raises:
        InvalidActionError: If the action is not recognised
        ValidationError: If the voter identifier is empty
    """
    vote_action = parse_action(action)
    if not voter:
        raise ValidationError("Voter identifier is required")

    before = current.state_of(voter)
    after = next_state(before, vote_action)

    liked_by = current.liked_by - {voter}
    disliked_by = current.disliked_by - {voter}
    if after == VoteState.LIKED:
        liked_by = liked_by | {voter}
    elif after == VoteState.DISLIKED:
        disliked_by = disliked_by | {voter}

    return VoteOutcome(
        membership=VoteMembership(liked_by=liked_by, disliked_by=disliked_by),
        state=after,
        delta=_SCORE[after] - _SCORE[before],
    )
