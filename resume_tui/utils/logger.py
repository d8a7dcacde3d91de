"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.

The viewer owns the whole screen while it runs, so unlike a batch script there
is no console handler: everything goes to the session log file.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level: str = "DEBUG",
) -> Path:
    """
    Configure loguru for a viewer session with provenance tracking.

    Removes every existing sink (including loguru's default stderr sink, which
    would scribble over the alternate screen) and adds a single file sink.

    Args:
        context_name: Log file stem (e.g., "viewer")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for provenance header
        level: Minimum level written to the file

    Returns:
        Path to log file

    Example:
        from resume_tui.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="viewer",
            log_dir=Path("outs/logs"),
            extra_provenance={"Resume": "data/resume.yaml"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=LOG_FORMAT, level=level.upper())

    log_provenance(extra_provenance)

    return log_file


def disable_logging() -> None:
    """Drop all sinks so nothing reaches the terminal while the viewer runs."""
    logger.remove()


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
