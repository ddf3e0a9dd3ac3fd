"""
Logging configuration for the application.
Every module logs under the "assistant_api" root, e.g. "assistant_api.services.suggestions".
"""
import logging
import sys

from assistant_api.app.core.config import settings

ROOT_LOGGER = "assistant_api"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure stdout logging once and return the "assistant_api" root logger."""
    level_val = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level_val,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level_val)
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for an area of the app, e.g. get_logger("services.documents")."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
