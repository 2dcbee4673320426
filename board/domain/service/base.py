"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services coordinate repositories and the pure domain logic (vote engine,
    thread builder). They are request-scoped and share the request's session.
    """

    pass
