"""Custom exceptions for the terminal context."""

from typing import Optional


class TerminalError(Exception):
    """
    Exception raised when the terminal device cannot be driven.

    Covers entering/leaving raw mode, switching to the alternate screen and
    reading input. Terminal failures are never retried.

    Attributes:
        message: Error description
        operation: Lifecycle step that failed (e.g., "acquire", "read")
        original_error: The underlying curses/OS error
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        self.message = message
        self.operation = operation
        self.original_error = original_error

        parts = [message]

        if operation:
            parts.append(f"Operation: {operation}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
