"""Interface layer errors.

Raised by request helpers before a use case runs. The application maps each
one to its HTTP status code.
"""


class InterfaceError(Exception):
    """Base interface error."""

    status_code: int = 400


class NotFoundError(InterfaceError):
    """Resource not found error, including ids that cannot exist."""

    status_code = 404


class AuthenticationRequiredError(InterfaceError):
    """Raised when an endpoint needs a signed-in user and none is present."""

    status_code = 401
