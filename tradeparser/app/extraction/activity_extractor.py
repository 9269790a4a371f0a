"""
Module for extracting activities from a folder or list of broker documents.
"""
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from tradeparser.app.config import get_settings
from .document_reader import read_document
from .errors import ExtractionError
from .registry import BrokerRegistry

logger = logging.getLogger(__name__)

COLUMNS = [
    "broker",
    "type",
    "date",
    "datetime",
    "isin",
    "wkn",
    "company",
    "shares",
    "price",
    "amount",
    "fee",
    "tax",
    "fxRate",
    "foreignCurrency",
    "status",
    "source",
]


def _collect_files(source: Union[Path, List[Path]], extension: str) -> list[Path] | None:
    if isinstance(source, list):
        return [f for f in source if f.exists()]
    if isinstance(source, Path) and source.exists():
        if source.is_dir():
            return sorted(source.glob(f"*.{extension}"))
        return [source]
    return None


def extract_activities(source: Union[Path, List[Path], None] = None) -> pd.DataFrame:
    """
    Extracts activities from every supported document.

    Args:
        source: Directory, single file or list of files. Defaults to STATEMENTS_ROOT.

    Returns:
        pd.DataFrame: one row per activity with the columns in COLUMNS.
    """
    settings = get_settings()
    if source is None:
        source = settings.statements_root

    files = _collect_files(source, settings.supported_extension)
    if files is None:
        logger.error(f"Invalid source provided: {source}")
        return pd.DataFrame(columns=COLUMNS)
    if not files:
        logger.warning("No supported files found in source")
        return pd.DataFrame(columns=COLUMNS)

    registry = BrokerRegistry(settings=settings)
    rows = []

    for f in files:
        logger.debug(f"Processing file: {f.name}")
        try:
            pages = read_document(f)
            result = registry.parse(pages, f.suffix)
        except ExtractionError as e:
            logger.warning(f"Skipping {f.name}: {e}")
            continue
        except Exception as e:
            logger.error(f"Error reading file {f.name}: {e}")
            continue

        if not result.activities:
            logger.warning(f"No activities in {f.name} (status {int(result.status)})")
        for activity in result.activities:
            row = activity.to_output()
            row["status"] = int(result.status)
            row["source"] = f.name
            rows.append(row)

    df = pd.DataFrame(rows)
    if df.empty:
        df = pd.DataFrame(columns=COLUMNS)
    else:
        for col in COLUMNS:
            if col not in df.columns:
                df[col] = None
        df = df[COLUMNS]

    logger.info(f"Extracted {len(df)} activities from {len(files)} files.")
    return df


__all__ = ["COLUMNS", "extract_activities"]
