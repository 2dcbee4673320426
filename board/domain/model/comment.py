"""Comment entity.

Comments are stored flat; each carries an optional reference to the comment
it replies to. The reply tree is rebuilt on read by the thread builder.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, SubjectId, UserId, Username


class Comment(DomainModel):
    """Comment on a subject or reply to another comment.

    - parent_comment_id: comment replied to (None for top-level)
    - like_count: net score, changed only through vote deltas
    """

    id: CommentId
    subject_id: SubjectId
    author_id: UserId
    author_username: Username
    content: str = Field(min_length=1, max_length=1000)
    parent_comment_id: Optional[CommentId] = None
    like_count: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
