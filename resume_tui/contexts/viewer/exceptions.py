"""Custom exceptions for the viewer context with file references."""

from pathlib import Path
from typing import Optional


class ResumeError(Exception):
    """Base class for résumé content errors."""

    pass


class ResumeLoadError(ResumeError):
    """
    Exception raised when a résumé YAML file cannot be read.

    Attributes:
        message: Error description
        path: File that failed to load
        original_error: The underlying OS / YAML error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"File: {path}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class InvalidResumeStructureError(ResumeError, ValueError):
    """
    Exception raised when résumé YAML is missing required fields.

    This is raised when the YAML file doesn't conform to the expected document
    schema (e.g., no 'document.metadata.name' or no 'document.sections').
    """

    pass


class ApplicationError(Exception):
    """
    Exception raised by the runtime loop when the viewer reports a failure.

    Attributes:
        reason: The exception carried by the FAILED outcome
    """

    def __init__(self, reason: Exception):
        self.reason = reason
        super().__init__(f"Viewer failed: {reason}")
