"""Subject aggregate root.

Subjects are the discussion topics of the board. Each subject is votable
and owns a flat list of comments.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import SubjectId, UserId, Username


class Subject(DomainModel):
    """Discussion topic.

    ``like_count`` is the net score (likes minus dislikes). It is only changed
    by applying vote deltas atomically in the repository.
    """

    id: SubjectId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=1000)
    author_id: UserId
    author_username: Username
    like_count: int = 0
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
