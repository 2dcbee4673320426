"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidActionError(ValidationError):
    """Raised when a vote action is not one of like, dislike or remove."""

    def __init__(self, action: object):
        self.action = action
        super().__init__(
            f"Invalid action {action!r}. Must be 'like', 'dislike', or 'remove'"
        )


class ConflictError(DomainError):
    """Raised when creating a resource that would duplicate a unique field."""

    pass


class AuthenticationError(DomainError):
    """Raised when login credentials do not match a user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
