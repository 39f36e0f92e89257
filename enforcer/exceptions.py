"""
Exceptions raised by the password strength enforcement core.
"""


class EnforcerError(Exception):
    """Base class for all enforcer errors."""
    pass


class ConfigurationError(EnforcerError):
    """Raised when a client configuration record cannot be parsed."""
    pass


class InvalidThresholds(ConfigurationError, ValueError):
    """Raised when a threshold is negative or not an integer."""
    pass
