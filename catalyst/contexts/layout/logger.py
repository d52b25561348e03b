"""
Layout context logger.

Provides logging interface for the layout context with automatic [layout] prefix.
All layout modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[layout]"


# Wrapper functions with automatic [layout] prefix


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level layout-specific logging helpers


def log_layout_summary(page_count: int, command_count: int) -> None:
    """Log the size of a finished layout run."""
    _log_debug(f"Layout finished: {page_count} page(s), {command_count} command(s)")


def log_diagnostics(diagnostics, verbose: bool = False) -> None:
    """
    Log layout diagnostics.

    Args:
        diagnostics: DocumentDiagnostics from analyze_layout()
        verbose: Show every issue and warning instead of the first few
    """
    issues = diagnostics.get_inherited_issues()
    warnings = diagnostics.get_inherited_warnings()

    if not issues:
        _log_info(f"Layout valid: {diagnostics.page_count} page(s)")
    else:
        _log_warning(f"Layout has {len(issues)} issue(s) across {diagnostics.page_count} page(s)")
        limit = len(issues) if verbose else 5
        for i, issue in enumerate(issues[:limit], 1):
            _log_warning(f"  Issue {i}: {issue}")
        if len(issues) > limit:
            _log_warning(f"  ... and {len(issues) - limit} more issues")

    if warnings:
        _log_debug(f"{len(warnings)} overflow warning(s)")
        limit = len(warnings) if verbose else 3
        for i, warning in enumerate(warnings[:limit], 1):
            _log_debug(f"  Warning {i}: {warning}")
