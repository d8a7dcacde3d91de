"""
Terminal context logger.

Provides logging interface for the terminal context with automatic [terminal] prefix.
All terminal modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[terminal]"


def _log_info(message: str) -> None:
    """Log info message with [terminal] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [terminal] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [terminal] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [terminal] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_session_acquired(width: int, height: int) -> None:
    """Log that the terminal is now in raw / alternate-screen mode."""
    _log_info(f"Raw mode and alternate screen enabled (viewport {width}x{height})")


def log_session_released(clean: bool) -> None:
    """Log terminal restoration."""
    if clean:
        _log_info("Terminal restored")
    else:
        _log_warning("Terminal restored with errors (see above)")
