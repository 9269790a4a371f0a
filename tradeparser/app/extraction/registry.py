"""
Broker identification and dispatch.

Every registered parser decides on its own whether it recognizes a document;
exactly one must. Zero matches means the document is unsupported, more than one
means two parsers' anchors overlap, which is a defect and is reported as such.
"""
from __future__ import annotations

import logging
from typing import Sequence

from tradeparser.app.config import Settings, get_settings
from .brokers import BaseBrokerParser, default_parsers
from .brokers.base import Pages
from .errors import AmbiguousDocument, UnsupportedDocument
from .models import ParseResult

logger = logging.getLogger(__name__)


def _normalize_extension(extension: str | None) -> str:
    return (extension or "").lower().lstrip(".")


class BrokerRegistry:
    def __init__(
        self,
        parsers: Sequence[BaseBrokerParser] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.parsers: list[BaseBrokerParser] = list(parsers) if parsers is not None else default_parsers()
        self.settings = settings or get_settings()

    def find_implementations(self, pages: Pages, extension: str) -> list[BaseBrokerParser]:
        """Every parser that recognizes the document."""
        return [parser for parser in self.parsers if parser.identify(pages, extension)]

    def identify(self, pages: Pages, extension: str) -> BaseBrokerParser:
        """
        Returns the single parser responsible for the document.

        Raises:
            UnsupportedDocument: unsupported extension or no parser matched.
            AmbiguousDocument: more than one parser matched.
        """
        extension = _normalize_extension(extension)
        if extension != self.settings.supported_extension:
            logger.debug(f"Extension {extension!r} is not supported")
            raise UnsupportedDocument(f"Unsupported file extension: {extension!r}")

        matches = self.find_implementations(pages, extension)
        if not matches:
            raise UnsupportedDocument()
        if len(matches) > 1:
            brokers = [parser.broker for parser in matches]
            logger.error(f"Document matched more than one broker: {brokers}")
            raise AmbiguousDocument(brokers)

        logger.debug(f"Document identified as {matches[0].broker}")
        return matches[0]

    def parse(self, pages: Pages, extension: str) -> ParseResult:
        parser = self.identify(pages, extension)
        result = parser.extract_pages(pages)
        logger.info(
            f"[{parser.broker}] {len(result.activities)} activities, status {int(result.status)}"
        )
        return result


def identify_document(pages: Pages, extension: str) -> BaseBrokerParser:
    return BrokerRegistry().identify(pages, extension)


def parse_document(pages: Pages, extension: str) -> ParseResult:
    return BrokerRegistry().parse(pages, extension)


__all__ = ["BrokerRegistry", "identify_document", "parse_document"]
