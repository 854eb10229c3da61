"""
Exceptions raised by schedule generation.
"""

from typing import Any, Optional


class ScheduleException(ValueError):
    """Raised when a schedule definition is invalid or cannot be generated.

    The definition that failed is kept on the exception so callers can
    report the inputs alongside the message.
    """

    def __init__(self, message: str, definition: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.definition = definition

    def __str__(self) -> str:
        return self.message
