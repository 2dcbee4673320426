"""Base classes for value objects."""

from typing import Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic import ValidationError as PydanticValidationError

from board.domain.error import ValidationError


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Value object wrapping a single primitive.

    The wrapped value is available as ``.root`` and ``model_dump()``
    returns the primitive, not a dict.
    """

    model_config = ConfigDict(
        frozen=True,
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)

    @classmethod
    def parse(cls, value: T) -> Self:
        """Construct from untrusted input.

        Raises:
            board.domain.error.ValidationError: With the first validator message
        """
        try:
            return cls(value)
        except PydanticValidationError as e:
            message = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise ValidationError(message) from e
