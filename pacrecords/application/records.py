"""Application service behind the records endpoint."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from pacrecords.core.courses import invalid_course_payload, select_course
from pacrecords.infrastructure import RecordExtractor, get_record_extractor

logger = logging.getLogger(__name__)


class RecordsService:
    """Resolves the requested course and forwards to the record extractor."""

    def __init__(self, extractor: RecordExtractor) -> None:
        self._extractor = extractor

    def get_records(self, params: Mapping[str, str]) -> list[Any]:
        course = select_course(params)
        if course is None:
            logger.info("records requested without a valid course: %s", sorted(params))
            return invalid_course_payload()
        return self._extractor.extract(course)


def get_records_service() -> RecordsService:
    return RecordsService(get_record_extractor())
