"""Application services."""

from .records import RecordsService, get_records_service

__all__ = [
    "RecordsService",
    "get_records_service",
]
