"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import Email, PhoneNumber, UserId, Username


class User(DomainModel):
    """Registered board member.

    Username and email are unique across users. The password is only ever
    stored as a bcrypt hash.
    """

    id: UserId
    username: Username
    email: Email
    phone: Optional[PhoneNumber] = None
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
