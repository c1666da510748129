# ============================================================================
# src/genotype_ingestion/utils/logging.py
# ============================================================================
"""
Logging setup for the genotype ingestion engine.

Modules log through ``logging.getLogger(__name__)``. Extraction and filtering
attach their outcome with ``extra=`` (see CONTEXT_FIELDS) so JSON logs can be
grouped by detected format, strategy or report category.
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Record attributes copied into the JSON "context" object when present
CONTEXT_FIELDS = (
    "source",
    "detected_format",
    "strategy",
    "variant_count",
    "synthesized_genotypes",
    "category",
    "filter_outcome",
)


def resolve_level(level: str) -> int:
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {level}")
    return getattr(logging, name)


def _build_handlers(formatter: logging.Formatter, log_file: Optional[Path]) -> List[logging.Handler]:
    # stderr keeps stdout free for CLI output
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_json: bool = False
) -> None:
    """
    Configure the root logger, replacing any handlers already installed.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), any case
        log_file: Also append records to this file
        format_json: Emit one JSON object per record

    Raises:
        ConfigurationError: if the level name is not a logging level
    """
    log_level = resolve_level(level)
    formatter = JsonFormatter() if format_json else logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    logging.basicConfig(
        level=log_level,
        handlers=_build_handlers(formatter, log_file),
        force=True
    )


def setup_logging_from_settings(settings=None) -> None:
    """Configure logging from LoggingSettings (defaults to the global instance)."""
    if settings is None:
        from ..config import logging_settings
        settings = logging_settings

    setup_logging(
        level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        format_json=settings.LOG_JSON
    )


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line.

    Extraction context passed with ``extra={"strategy": ..., ...}`` lands
    under "context"; unknown extras are ignored.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)}
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def log_performance(logger: logging.Logger, operation: str):
    """
    Time the decorated call.

    Success is logged at DEBUG; a failure is logged at ERROR and re-raised.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                logger.error(f"{operation} failed after {elapsed_ms:.1f}ms: {e}")
                raise

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug(f"{operation} completed in {elapsed_ms:.1f}ms")
            return result

        return wrapper
    return decorator
