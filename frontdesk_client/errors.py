"""Failure types raised by the front-desk client."""
from __future__ import annotations

from typing import Optional, Sequence


class FrontDeskError(Exception):
    """Base class for client failures."""


class ValidationFailure(FrontDeskError):
    """A record failed client-side checks and was not sent."""

    def __init__(self, messages: Sequence[str]):
        self.messages = list(messages)
        super().__init__('; '.join(self.messages))


class TransportFailure(FrontDeskError):
    """The server was unreachable, timed out or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NotFound(TransportFailure):
    """The server answered 404 for the requested record."""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)
