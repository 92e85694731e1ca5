"""Domain layer definitions."""

from .accumulator import ResponseAccumulator

__all__ = [
    "ResponseAccumulator",
]
