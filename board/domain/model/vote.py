"""Vote entity.

A vote records one user's like or dislike on a subject or comment.
A user without a vote on an item is neutral towards it.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import UserId, VotableType, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per user per item (database unique constraint), so a
      user can never both like and dislike the same item
    - Polymorphic reference to the votable (subject or comment)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # SubjectId or CommentId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
