"""Subject representation returned by the subject use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import Subject
from board.domain.value import VoteState


class SubjectItem(BaseModel):
    """Subject with the caller's vote state."""

    id: str
    title: str
    description: str
    author_id: str
    author_username: str
    like_count: int
    comment_count: int
    user_liked: bool
    user_disliked: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_subject(
        cls, subject: Subject, state: VoteState = VoteState.NEUTRAL
    ) -> "SubjectItem":
        return cls(
            id=str(subject.id),
            title=subject.title,
            description=subject.description,
            author_id=str(subject.author_id),
            author_username=subject.author_username.root,
            like_count=subject.like_count,
            comment_count=subject.comment_count,
            user_liked=state == VoteState.LIKED,
            user_disliked=state == VoteState.DISLIKED,
            created_at=subject.created_at,
            updated_at=subject.updated_at,
        )
