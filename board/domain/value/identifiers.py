"""Strongly typed identifiers for discussion board entities.

Using NewType prevents mixing up different entity IDs and makes
signatures self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
SubjectId = NewType("SubjectId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
