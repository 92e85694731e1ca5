"""Record extraction hooks for the records endpoint.

The endpoint does not know how records are stored.  It asks the installed
:class:`RecordExtractor` for the records of a course and forwards whatever
comes back.  ``configure_record_extractor`` installs the implementation
during application start-up; without one the endpoint answers with an
empty list.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class RecordExtractor(Protocol):
    """Contract for record sources."""

    def extract(self, course: str) -> list[Any]:
        """Return the records of the given course."""


class NoOpRecordExtractor:
    """Fallback extractor used when no record source is configured."""

    def extract(self, course: str) -> list[Any]:
        return []


class JsonFileRecordExtractor:
    """Serve records from a JSON document keyed by course code.

    The file is re-read on every call so edits show up without a restart.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        if not self._path.is_file():
            raise FileNotFoundError(f"records file not found: {self._path}")

    def extract(self, course: str) -> list[Any]:
        with self._path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)
        if not isinstance(data, dict):
            raise ValueError(f"records file must hold an object keyed by course: {self._path}")
        records = data.get(course) or []
        if not isinstance(records, list):
            raise ValueError(f"records for {course} must be a list")
        logger.debug("loaded %d %s records from %s", len(records), course, self._path)
        return records


_extractor: RecordExtractor = NoOpRecordExtractor()


def configure_record_extractor(extractor: RecordExtractor) -> None:
    """Install the record extractor used by the records endpoint."""

    global _extractor
    _extractor = extractor


def get_record_extractor() -> RecordExtractor:
    """Return the currently configured record extractor."""

    return _extractor


def reset_record_extractor() -> None:
    """Utility used in tests to restore the fallback extractor."""

    configure_record_extractor(NoOpRecordExtractor())
