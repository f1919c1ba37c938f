"""Startup validation and configuration checks."""

import logging

from deps import Path

from .config import get_catalog_path, get_log_level, get_together_api_key

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure the root logger from LOG_LEVEL."""
    level = getattr(logging, get_log_level(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_config() -> None:
    """Validate config at startup and warn if .env or TOGETHER_API_KEY missing."""
    env_file = Path(".env")
    if not env_file.exists():
        logger.warning(".env file not found. AI suggestion refinement will be disabled.")
    elif not get_together_api_key():
        logger.warning("TOGETHER_API_KEY not set in .env. AI suggestion refinement will be disabled.")

    catalog_path = get_catalog_path()
    if catalog_path is not None and not catalog_path.is_file():
        logger.warning("BASELINE_CATALOG_PATH %s does not exist; using the built-in catalog.", catalog_path)
