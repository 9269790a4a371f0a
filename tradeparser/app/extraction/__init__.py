"""Extraction of financial activities from brokerage documents."""
from .activity_extractor import extract_activities
from .document_reader import read_document
from .errors import (
    AmbiguousDocument,
    ExtractionError,
    FieldNotFound,
    InvalidRecord,
    MalformedNumber,
    StatusCode,
    UnsupportedDocument,
)
from .models import Activity, ActivityType, ParseResult
from .registry import BrokerRegistry, identify_document, parse_document

__all__ = [
    "Activity",
    "ActivityType",
    "AmbiguousDocument",
    "BrokerRegistry",
    "ExtractionError",
    "FieldNotFound",
    "InvalidRecord",
    "MalformedNumber",
    "ParseResult",
    "StatusCode",
    "UnsupportedDocument",
    "extract_activities",
    "identify_document",
    "parse_document",
    "read_document",
]
