"""
Rendering context logger.

Every record goes through the [render] prefix wrappers below; rendering
modules import these instead of loguru or utils.logger.
"""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from catalyst.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"

# How many errors and warnings to list when not verbose
ERROR_PREVIEW = 5
WARNING_PREVIEW = 3


def setup_rendering_logger(
    log_dir: Path, presets: Optional[List[str]] = None, console: bool = True
) -> Path:
    """Start an export session log in log_dir; returns the log file path."""
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Layout presets": ", ".join(presets or []) or "(template defaults)"},
        console=console,
    )


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_preview(log, label: str, messages: List[str], limit: int) -> None:
    """Log up to limit numbered messages, then a count of the rest."""
    for number, message in enumerate(messages[:limit], 1):
        log(f"  {label} {number}: {message}")
    hidden = len(messages) - limit
    if hidden > 0:
        log(f"  ... {hidden} more {label.lower()}(s) not shown")


def log_export_start(subject: str, presets: List[str], output_path: Path) -> None:
    _log_info(f"Exporting resume for {subject}")
    _log_debug(f"  Presets: {', '.join(presets)}")
    _log_debug(f"  Output: {output_path}")


def log_export_result(
    subject: str,
    result,  # ExportResult
    elapsed_time: float,
    verbose: bool = False,
) -> None:
    """
    Summarize a finished export.

    Args:
        subject: User email
        result: ExportResult from export_resume()
        elapsed_time: Seconds spent on layout, checks and PDF output
        verbose: List every error and warning instead of a preview
    """
    timing = f"({elapsed_time:.2f}s)"

    if result.success:
        _log_success(f"{subject}: {result.page_count} page(s) written {timing}")
        _log_debug(f"  PDF: {result.pdf_path}")
    else:
        _log_error(f"{subject}: export failed with {len(result.errors)} error(s) {timing}")
        limit = len(result.errors) if verbose else ERROR_PREVIEW
        _log_preview(_log_error, "Error", result.errors, limit)

    if result.warnings:
        _log_warning(f"{len(result.warnings)} text run(s) extend past the right margin")
        limit = len(result.warnings) if verbose else WARNING_PREVIEW
        _log_preview(_log_debug, "Warning", result.warnings, limit)
