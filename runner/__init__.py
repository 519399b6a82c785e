"""
Runner module for the content intelligence engine.

This module contains:
- Logging setup
- Per-service loggers
- Timed analysis-run logging
"""

from runner.logging_setup import setup_logging, get_logger, log_analysis_run

__version__ = "0.1.0"

__all__ = [
    "setup_logging",
    "get_logger",
    "log_analysis_run",
]
