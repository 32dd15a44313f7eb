"""
Exception hierarchy for ContactDedup.
"""


class ContactDedupError(Exception):
    """Base class for ContactDedup errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ContactReadError(ContactDedupError):
    """Raised when a contact source file cannot be read."""
    pass


class ConfigError(ContactDedupError):
    """Raised when configuration is invalid and cannot be recovered."""
    pass
