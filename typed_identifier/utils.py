"""
Utility functions for typed_identifier

Provides logging setup and the logger accessor
"""

import logging
from pathlib import Path
from typing import Optional

from typed_identifier.settings import TypedIdentifierSettings, get_settings


# ═══════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_file: Optional[str | Path] = None) -> None:
    """Configure logging for typed_identifier"""
    level = getattr(logging, log_level.upper())

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def setup_logging_from_settings(settings: Optional[TypedIdentifierSettings] = None) -> None:
    """Configure logging from TypedIdentifierSettings (global settings by default)"""
    settings = settings if settings is not None else get_settings()
    setup_logging(settings.log_level, settings.log_file)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance for module"""
    return logging.getLogger(name)
