"""Status codes reported by the web services."""
from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """Negative ``status`` values carried by envelopes and record payloads.

    Non-negative statuses are line counts of a successful response, so every
    failure is encoded below zero.
    """

    ILLEGAL_SERVICE = -1
    HTTP_FAILURE = -2
    RESPONSE_FAILURE = -3
    INVALID_COURSE = -10


__all__ = ["ErrorKind"]
