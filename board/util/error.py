"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are unusable for the selected environment."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when a DI provider implementation cannot be resolved."""

    pass
