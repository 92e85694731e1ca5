"""Infrastructure layer exports."""

from .records import (
    JsonFileRecordExtractor,
    NoOpRecordExtractor,
    RecordExtractor,
    configure_record_extractor,
    get_record_extractor,
    reset_record_extractor,
)
from .webservice import WebServiceClient

__all__ = [
    "JsonFileRecordExtractor",
    "NoOpRecordExtractor",
    "RecordExtractor",
    "WebServiceClient",
    "configure_record_extractor",
    "get_record_extractor",
    "reset_record_extractor",
]
