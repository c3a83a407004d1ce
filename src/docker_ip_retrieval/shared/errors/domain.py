"""
Domain errors.

Errors raised by application logic rather than by external systems.
"""
from typing import Any, Optional


class DomainError(Exception):
    """Base class for domain errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(DomainError):
    """A helper was called with an argument of the wrong shape"""
    pass


class PromptFailureError(DomainError):
    """No usable container selection could be obtained"""
    pass
