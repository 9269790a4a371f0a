"""
Batch extraction script.
Reads every PDF of a folder (default: STATEMENTS_ROOT) and writes the extracted activities to CSV.

Usage:
    python main.py [source] [output.csv]
"""
import sys
import logging
from pathlib import Path

# Ensure tradeparser is importable
ROOT_DIR = Path(__file__).resolve().parent
sys.path.append(str(ROOT_DIR))

from tradeparser.config import setup_logging
from tradeparser.app.extraction.activity_extractor import extract_activities

logger = logging.getLogger("main")

DEFAULT_OUTPUT = ROOT_DIR / "activities.csv"


def run(source: Path | None, output: Path) -> int:
    df = extract_activities(source)
    if df.empty:
        logger.warning("No activities extracted.")
        return 1

    df.to_csv(output, index=False)
    logger.info(f"Wrote {len(df)} activities to {output}")
    return 0


def main():
    setup_logging()
    args = sys.argv[1:]
    source = Path(args[0]) if args else None
    output = Path(args[1]) if len(args) > 1 else DEFAULT_OUTPUT
    sys.exit(run(source, output))


if __name__ == "__main__":
    main()
