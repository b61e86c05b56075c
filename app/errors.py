class TypepaceError(Exception):
    """Base error for the typing test."""


class ConfigurationError(TypepaceError, ValueError):
    """Raised when a test is configured with values it cannot run with."""
