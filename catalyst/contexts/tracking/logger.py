"""
Tracking context logger.

Provides logging interface for the tracking context with automatic [track] prefix.
All tracking modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from catalyst.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[track]"


def setup_tracking_logger(log_dir: Path, console: bool = True) -> Path:
    """
    Setup logger for tracking context.

    Args:
        log_dir: Directory for this tracking session
        console: Also log INFO and above to stdout

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="track",
        log_dir=log_dir,
        extra_provenance={"Data path": os.getenv("CATALYST_DATA_PATH", "data")},
        console=console,
    )


# Wrapper functions with automatic [track] prefix


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level tracking-specific logging helpers


def log_store_loaded(data_dir: Path, user_count: int, resource_count: int) -> None:
    _log_info(f"Loaded {user_count} user(s) and {resource_count} resource(s)")
    _log_debug(f"  Data directory: {data_dir}")


def log_deadline_check(user_email: str, approaching: int, newly_notified: int) -> None:
    """Log one pass of the deadline notifier."""
    if newly_notified:
        _log_info(
            f"{user_email}: {newly_notified} new deadline reminder(s) "
            f"({approaching} approaching)"
        )
    else:
        _log_debug(f"{user_email}: no new reminders ({approaching} approaching)")
