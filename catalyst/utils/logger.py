"""
Tier 1 (detailed) logging for CareerCatalyst sessions.

A session is one run of something worth auditing afterwards: a resume
export or a deadline watcher. Each session gets its own directory under
CATALYST_LOGS_PATH holding a "<context>.log" file with every DEBUG record,
while INFO and above are echoed to the console.

Context-specific prefixes live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from catalyst import __version__
from catalyst.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("CATALYST_LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
RULE = "=" * 80


def session_log_dir(kind: str, base: Optional[Path] = None) -> Path:
    """
    Fresh directory name for one session (e.g., outs/logs/export_20261019_134501).

    The directory is created by setup_logger, not here.
    """
    return (base or LOGS_PATH) / f"{kind}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console: bool = True,
) -> Path:
    """
    Route loguru output to a session directory and write the provenance header.

    Replaces any sinks configured earlier in the process, so only the most
    recent session receives records.

    Args:
        context_name: Context identifier, used as the log file name ("render", "track")
        log_dir: Session directory (created if missing)
        extra_provenance: Additional key-value pairs for the header
        console: Also echo INFO and above to stdout

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance({"Context": context_name, **(extra_provenance or {})})
    return log_file


def log_provenance(details: Optional[Dict[str, object]] = None) -> None:
    """Log where this session came from, followed by any extra details."""
    header = {
        "CareerCatalyst": __version__,
        "Python": sys.version.split()[0],
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        **(details or {}),
    }

    logger.info(RULE)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info(RULE)
