"""Public user representation shared by the auth use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import User


class UserInfo(BaseModel):
    """User information safe to return to clients (no password hash)."""

    id: str
    username: str
    email: str
    phone: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            phone=user.phone.root if user.phone else None,
            created_at=user.created_at,
        )
