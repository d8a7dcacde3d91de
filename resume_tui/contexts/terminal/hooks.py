"""
Fatal-error hooks: restore the terminal before anything is reported.

The guarantee is expressed as plain function composition. ErrorHooks.guard()
wraps the viewer session and, on any exception, calls restore() and only then
report(). install() additionally chains sys.excepthook so an exception that
escapes the guard (or is raised outside it) still leaves the shell usable
before Python prints the traceback.

Usage:
    session = TerminalSession()
    hooks = ErrorHooks(restore=session.release).install()
    try:
        exit_code = hooks.guard(lambda: run_session(app, session))
    finally:
        hooks.uninstall()
"""

import sys
import traceback
from typing import Callable, Optional

import typer
from loguru import logger

from resume_tui.contexts.terminal.exceptions import TerminalError
from resume_tui.contexts.viewer.exceptions import ApplicationError, ResumeError

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Errors with a message written for the user; anything else also gets a traceback
EXPECTED_ERRORS = (TerminalError, ApplicationError, ResumeError)

_installed: Optional["ErrorHooks"] = None


def report_fatal(error: BaseException) -> None:
    """
    Report an unrecoverable error after the terminal has been restored.

    Args:
        error: The exception that ended the session
    """
    logger.opt(exception=error).error(f"Viewer terminated: {error}")

    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    if not isinstance(error, EXPECTED_ERRORS):
        traceback.print_exception(type(error), error, error.__traceback__, file=sys.stderr)


class ErrorHooks:
    """
    Restore-then-report composition around the viewer session.

    Attributes:
        restore: Terminal restoration callback (must not raise)
        report: Called with the exception once the terminal is restored
    """

    def __init__(
        self,
        restore: Callable[[], None],
        report: Optional[Callable[[BaseException], None]] = None,
    ):
        self.restore = restore
        self.report = report if report is not None else report_fatal
        self._previous_excepthook = None

    @property
    def is_installed(self) -> bool:
        return _installed is self

    def install(self) -> "ErrorHooks":
        """
        Register the restoration callback process-wide (once per process).

        Raises:
            RuntimeError: If hooks are already installed
        """
        global _installed
        if _installed is not None:
            raise RuntimeError("Error hooks are already installed")

        self._previous_excepthook = sys.excepthook
        sys.excepthook = self._excepthook
        _installed = self
        return self

    def uninstall(self) -> None:
        global _installed
        if _installed is not self:
            return
        sys.excepthook = self._previous_excepthook
        self._previous_excepthook = None
        _installed = None

    def _excepthook(self, exc_type, exc, tb) -> None:
        self.restore()
        self._previous_excepthook(exc_type, exc, tb)

    def guard(self, body: Callable[[], int]) -> int:
        """
        Run body; on failure restore the terminal, then report.

        Args:
            body: Session function returning an exit status

        Returns:
            body's exit status, or EXIT_FAILURE if it raised an Exception

        Raises:
            BaseException: KeyboardInterrupt / SystemExit are re-raised after restore
        """
        try:
            return body()
        except Exception as e:
            self.restore()
            self.report(e)
            return EXIT_FAILURE
        except BaseException:
            self.restore()
            raise
