"""
Logging setup for the content intelligence engine.

This module provides:
- One "content-intel" logger that owns the handlers
- Per-service child loggers (content-intel.topic_clusterer, ...)
- Console handler (always)
- Rotating file handler (when LOG_DIR or an explicit log file is given)
- Timed analysis-run logging

Usage:
    from runner.logging_setup import get_logger, log_analysis_run

    logger = get_logger("content_analyzer")

    with log_analysis_run(logger, "content analysis", domain="example.com", pages=12):
        ...
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Any, Generator

from dotenv import load_dotenv


# Load environment
load_dotenv()

ROOT_LOGGER = "content-intel"


def setup_logging(
    name: str = ROOT_LOGGER,
    log_level: str = None,
    log_file: str = None,
) -> logging.Logger:
    """
    Setup logging with console and optional file handlers.

    Args:
        name: Logger name (default: "content-intel")
        log_level: Log level (default: from LOG_LEVEL env var or INFO)
        log_file: Log file path (default: $LOG_DIR/{name}.log when LOG_DIR is set)

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "INFO")
    log_level = log_level.upper()

    numeric_level = getattr(logging, log_level, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Service name is part of every line; analysis runs interleave services
    console_formatter = logging.Formatter(
        "%(levelname)s - %(name)s - %(message)s"
    )

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler only when a destination is configured
    if log_file is None:
        logs_dir = os.getenv("LOG_DIR")
        if logs_dir:
            logs_path = Path(logs_dir)
            logs_path.mkdir(parents=True, exist_ok=True)
            log_file = logs_path / f"{name}.log"

    if log_file is not None:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized: level={log_level}, file={log_file}")

    return logger


def service_logger_name(name: str) -> str:
    """Place a service name under the engine's logger namespace."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return name
    return f"{ROOT_LOGGER}.{name}"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Get a service logger.

    The shared "content-intel" logger is configured on first use; service
    loggers have no handlers of their own and propagate to it, so LOG_LEVEL
    and LOG_DIR apply to every service at once.

    Args:
        name: Service name, e.g. "topic_clusterer"

    Returns:
        Logger instance named content-intel.<name>
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        setup_logging(ROOT_LOGGER)

    return logging.getLogger(service_logger_name(name))


@contextmanager
def log_analysis_run(
    logger: logging.Logger,
    operation: str,
    **context: Any,
) -> Generator[None, None, None]:
    """
    Log the start, outcome and duration of one analysis run.

    Failures are logged with their duration and re-raised.

    Args:
        logger: Logger to write to
        operation: Human-readable run name, e.g. "content analysis"
        **context: Key details shown with the run (domain, page counts...)
    """
    details = ", ".join(f"{key}={value}" for key, value in context.items())
    label = f"{operation} ({details})" if details else operation

    logger.info(f"Starting {label}")
    started = time.perf_counter()

    try:
        yield
    except Exception as e:
        logger.error(f"{label} failed after {time.perf_counter() - started:.2f}s: {e}")
        raise

    logger.info(f"Finished {label} in {time.perf_counter() - started:.2f}s")
