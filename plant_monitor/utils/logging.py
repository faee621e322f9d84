"""
Logging configuration for the plant moisture dashboard.

Provides consistent logging setup across all pipeline components and a
helper for the per-component statistics summaries.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

# AWS SDK loggers that flood DEBUG output with wire-level detail
NOISY_LOGGERS = ("botocore", "boto3", "s3transfer", "urllib3")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    include_timestamp: bool = True,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS
) -> None:
    """
    Set up logging configuration for a dashboard refresh.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging output
        include_timestamp: Whether to include timestamps in log messages
        quiet_loggers: Library loggers kept at INFO or above
    """
    if include_timestamp:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(max(root.level, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific component.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_stats(logger: logging.Logger, title: str, stats: Dict[str, Any]) -> None:
    """Log a component's statistics as an '=== Title Summary ===' block."""
    logger.info(f"=== {title} Summary ===")
    for key, value in stats.items():
        logger.info(f"{key.replace('_', ' ').title()}: {value}")
