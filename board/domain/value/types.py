"""Domain value objects for the discussion board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from board.domain.value.common import RootValueObject


class VoteAction(str, Enum):
    """Action a voter can request on a votable item."""

    LIKE = "like"
    DISLIKE = "dislike"
    REMOVE = "remove"


class VoteState(str, Enum):
    """A single voter's standing on a votable item."""

    NEUTRAL = "neutral"
    LIKED = "liked"
    DISLIKED = "disliked"


class VoteType(str, Enum):
    """Type of a stored vote.

    Neutral is represented by the absence of a vote, so it has no member here.
    """

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def state(self) -> VoteState:
        """Voter state this stored vote represents."""
        return VoteState.LIKED if self is VoteType.LIKE else VoteState.DISLIKED


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    SUBJECT = "subject"
    COMMENT = "comment"


class CommentSortOrder(str, Enum):
    """Ordering of top-level comments in a thread."""

    NEWEST = "newest"
    OLDEST = "oldest"


class Username(RootValueObject[str]):
    """Public username.

    3-50 characters: letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if len(v) < 3 or len(v) > 50:
            raise ValueError("Username must be between 3 and 50 characters")
        if not re.match(r"^[a-zA-Z0-9_]+$", v):
            raise ValueError(
                "Username can only contain letters, numbers, and underscores"
            )
        return v


class Email(RootValueObject[str]):
    """Email address used to log in."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate basic email shape."""
        if not re.match(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", v):
            raise ValueError("Invalid email format")
        return v


class PhoneNumber(RootValueObject[str]):
    """Optional phone number kept for account recovery."""

    @field_validator("root")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        """Validate phone number format (spaces ignored)."""
        if not re.match(r"^\+?[\d\-\(\)]{10,15}$", v.replace(" ", "")):
            raise ValueError("Invalid phone number format")
        return v
