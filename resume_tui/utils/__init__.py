"""
Shared utilities for resume_tui.

Common functionality used across contexts:
- Logging setup and provenance
"""

from resume_tui.utils.logger import disable_logging, setup_logger

__all__ = ["disable_logging", "setup_logger"]
