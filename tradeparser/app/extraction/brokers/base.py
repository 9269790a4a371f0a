"""
Parser contract shared by all institution modules, plus the block runners.

A block parser turns the lines of one transaction into a candidate dict; the
runners validate the candidate and decide what a failure means:

* single-transaction documents abort with EXTRACTION_FAILED,
* multi-transaction documents skip the failed block and keep the rest.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Any, Callable, Dict, Iterable, Sequence

from ..errors import StatusCode
from ..locator import flatten
from ..models import ParseResult
from ..validator import validate_activity

logger = logging.getLogger(__name__)

Pages = Sequence[Sequence[str]]
Candidate = Dict[str, Any]
BlockParser = Callable[[Sequence[str]], Candidate]


class BaseBrokerParser(ABC):
    """Interface for institution parsers."""

    broker: str
    single_transaction: bool = True

    @abstractmethod
    def identify(self, pages: Pages, extension: str) -> bool:
        """Returns True if the document was issued by this institution."""

    @abstractmethod
    def extract_pages(self, pages: Pages) -> ParseResult:
        """Extracts every activity of an identified document."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(broker={self.broker!r})"


def extract_single(
    broker: str,
    parse_block: BlockParser,
    pages: Pages,
    all_pages: bool = False,
) -> ParseResult:
    """
    Runs a single-transaction document.

    Args:
        broker: Name used in log messages.
        parse_block: Builds the candidate record from a list of lines.
        pages: Tokenized document.
        all_pages: Hand the block parser every line of the document instead of
            the first page only (fees and taxes spread over several pages).

    Returns:
        ParseResult: one activity, or no activity with EXTRACTION_FAILED.
    """
    if not pages:
        logger.error(f"[{broker}] Empty document")
        return ParseResult.failed()

    lines = flatten(pages) if all_pages else list(pages[0])
    try:
        candidate = parse_block(lines)
    except Exception as e:
        logger.error(f"[{broker}] Extraction failed: {e}. Block content: {lines}")
        return ParseResult.failed()

    activity = validate_activity(candidate, lines)
    if activity is None:
        return ParseResult.failed()
    return ParseResult((activity,), StatusCode.SUCCESS)


def extract_each(
    broker: str,
    parse_block: BlockParser,
    blocks: Iterable[Sequence[str]],
) -> ParseResult:
    """
    Runs every block of a multi-transaction document independently.

    A block that raises or produces an invalid record is logged with its content
    and skipped. Output order follows block order; the status stays SUCCESS.
    """
    activities = []
    for index, block in enumerate(blocks):
        lines = list(block)
        try:
            candidate = parse_block(lines)
        except Exception as e:
            logger.error(f"[{broker}] Block {index} failed: {e}. Block content: {lines}")
            continue

        activity = validate_activity(candidate, lines)
        if activity is None:
            logger.error(f"[{broker}] Block {index} skipped. Block content: {lines}")
            continue
        activities.append(activity)

    logger.debug(f"[{broker}] {len(activities)} activities extracted")
    return ParseResult(tuple(activities), StatusCode.SUCCESS)


def page_blocks(pages: Pages) -> list[list[str]]:
    """One block per page, the block layout of statement-style documents."""
    return [list(page) for page in pages if page]


__all__ = [
    "Pages",
    "Candidate",
    "BlockParser",
    "BaseBrokerParser",
    "extract_single",
    "extract_each",
    "page_blocks",
]
