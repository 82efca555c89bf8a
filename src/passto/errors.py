"""
Domain-specific exceptions for Passto.
All exceptions are explicit and carry meaningful context.
"""


class PasstoError(Exception):
    """Base exception for all Passto errors."""
    pass


class SettingsError(PasstoError):
    """Base exception for settings-related errors."""
    pass


class InvalidSettingsError(SettingsError, ValueError):
    """Raised when a settings parameter is outside its domain."""
    pass


class SettingsDeserializationError(SettingsError):
    """Raised when settings text cannot be parsed into settings."""
    pass


class DigestError(PasstoError):
    """Base exception for digest encoding errors."""
    pass


class CustomAlphabetTooShortError(DigestError):
    """Raised when a custom alphabet has too few characters."""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Custom alphabet too short: {length} characters, need at least {minimum}"
        )
