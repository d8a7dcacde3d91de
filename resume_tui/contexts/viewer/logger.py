"""
Viewer context logger.

Provides logging interface for the viewer context with automatic [viewer] prefix.
All viewer modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[viewer]"


def _log_info(message: str) -> None:
    """Log info message with [viewer] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [viewer] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [viewer] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [viewer] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_document_loaded(name: str, source: Path, section_count: int) -> None:
    """Log a successfully loaded résumé."""
    _log_info(f"Loaded resume for {name} ({section_count} sections)")
    _log_debug(f"Source: {source}")


def log_include_loaded(section_name: str, include_path: Path, entry_count: int) -> None:
    """Log a lazily loaded section file."""
    _log_info(f"Loaded section '{section_name}' from {include_path} ({entry_count} entries)")
