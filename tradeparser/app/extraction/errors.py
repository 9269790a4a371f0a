"""Error taxonomy and status codes for document extraction."""
from __future__ import annotations

from enum import IntEnum
from typing import Iterable


class StatusCode(IntEnum):
    """Status returned next to the activity list."""

    SUCCESS = 0
    # Single-transaction document whose only block could not be extracted.
    EXTRACTION_FAILED = 1
    # Recognized institution and shape, deliberately not extracted (order confirmations etc.).
    UNSUPPORTED_VARIANT = 7


class ExtractionError(Exception):
    """Base class for extraction failures."""


class UnsupportedDocument(ExtractionError):
    """No registered broker recognized the document."""

    code = "unsupported_broker"

    def __init__(self, message: str = "No supported broker found for document.") -> None:
        super().__init__(message)


class AmbiguousDocument(ExtractionError):
    """More than one broker recognized the document (anchor design defect)."""

    code = "ambiguous_broker"

    def __init__(self, brokers: Iterable[str]) -> None:
        self.brokers = tuple(brokers)
        super().__init__(f"Document matched more than one broker: {', '.join(self.brokers)}")


class MalformedNumber(ExtractionError, ValueError):
    """A numeric token could not be converted to Decimal."""

    def __init__(self, raw: object) -> None:
        self.raw = raw
        super().__init__(f"Malformed number: {raw!r}")


class FieldNotFound(ExtractionError, LookupError):
    """A structural anchor of a block is missing, nothing can be located relative to it."""

    def __init__(self, field: str, anchor: str | None = None) -> None:
        self.field = field
        self.anchor = anchor
        detail = f" (anchor {anchor!r})" if anchor else ""
        super().__init__(f"Field {field!r} not found{detail}")


class InvalidRecord(ExtractionError):
    """Validator rejected a candidate activity."""

    def __init__(self, fields: Iterable[str], reason: str = "missing or invalid fields") -> None:
        self.fields = tuple(fields)
        super().__init__(f"Invalid activity, {reason}: {', '.join(self.fields)}")


__all__ = [
    "StatusCode",
    "ExtractionError",
    "UnsupportedDocument",
    "AmbiguousDocument",
    "MalformedNumber",
    "FieldNotFound",
    "InvalidRecord",
]
