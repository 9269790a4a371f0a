"""
Logging bootstrap for the extraction pipeline.
Loads the project .env into the process environment; level comes from LOG_LEVEL
(see tradeparser.app.config).
"""
import sys
import logging

from dotenv import load_dotenv

from tradeparser.app.config import ENV_FILE, get_settings

# Load environment variables
load_dotenv(ENV_FILE)


def setup_logging(level=None):
    """
    Configure logging for the application.

    Args:
        level: Optional override (name or logging constant). Defaults to Settings.log_level.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
