"""
Terminal lifecycle: raw mode, alternate screen and the fixed viewport.

TerminalSession is the single owner of the terminal for the life of the
process. It delegates the device work to a backend (CursesBackend in
production, a recording fake in tests) and guarantees that the device is
restored at most once per acquisition, swallowing restore failures.
"""

import curses
import sys
from typing import Dict, Optional, Union

from resume_tui.contexts.terminal import theme as THEME
from resume_tui.contexts.terminal.exceptions import TerminalError
from resume_tui.contexts.terminal.keys import KeyEvent, TerminalEvent, decode_alt_key, decode_key
from resume_tui.contexts.terminal.logger import (
    _log_debug,
    _log_warning,
    log_session_acquired,
    log_session_released,
)

VIEWPORT_WIDTH = 120
VIEWPORT_HEIGHT = 40

# Milliseconds curses waits after ESC to tell a bare Esc from an escape sequence
ESC_DELAY_MS = 25
ESC = "\x1b"


class CursesViewport:
    """
    Fixed-size drawing surface backed by a curses pad.

    The pad is always VIEWPORT_WIDTH x VIEWPORT_HEIGHT. present() copies the
    part that fits on the physical screen; the rest is clipped.
    """

    def __init__(self, screen, styles: Dict[str, int], width: int = VIEWPORT_WIDTH, height: int = VIEWPORT_HEIGHT):
        self.screen = screen
        self.styles = styles
        self.width = width
        self.height = height
        self.pad = curses.newpad(height, width)

    def clear(self) -> None:
        self.pad.erase()

    def draw_text(self, y: int, x: int, text: str, style: str = "normal") -> None:
        """Draw text safely, truncated at the right edge of the viewport."""
        if y < 0 or y >= self.height or x < 0 or x >= self.width:
            return
        display_text = text[: self.width - x]
        try:
            self.pad.addstr(y, x, display_text, self.styles.get(style, curses.A_NORMAL))
        except curses.error:
            # Writing the bottom-right cell moves the cursor off the pad
            pass

    def present(self) -> None:
        h, w = self.screen.getmaxyx()
        rows = min(self.height, h)
        cols = min(self.width, w)
        if rows <= 0 or cols <= 0:
            return
        try:
            self.pad.noutrefresh(0, 0, 0, 0, rows - 1, cols - 1)
            curses.doupdate()
        except curses.error as e:
            raise TerminalError("Failed to draw viewport", operation="present", original_error=e)


class CursesBackend:
    """Device operations for a real terminal, implemented with curses."""

    def __init__(self, width: int = VIEWPORT_WIDTH, height: int = VIEWPORT_HEIGHT):
        self.width = width
        self.height = height
        self._screen = None

    def enter(self) -> CursesViewport:
        if not (sys.stdin.isatty() and sys.stdout.isatty()):
            raise TerminalError("stdin/stdout is not an interactive terminal", operation="acquire")

        try:
            # initscr switches to the alternate screen on terminals that have one
            self._screen = curses.initscr()
            curses.raw()
            curses.noecho()
            self._screen.keypad(True)
            if hasattr(curses, "set_escdelay"):
                curses.set_escdelay(ESC_DELAY_MS)
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            styles = THEME.init_theme()

            # get_wch() refreshes stdscr when it is touched; flush it once so it
            # never repaints over the pad
            self._screen.clear()
            self._screen.refresh()
            return CursesViewport(self._screen, styles, self.width, self.height)
        except curses.error as e:
            raise TerminalError(
                "Terminal does not support raw mode / alternate screen",
                operation="acquire",
                original_error=e,
            )

    def exit(self) -> None:
        if self._screen is None:
            return
        try:
            self._screen.keypad(False)
            curses.noraw()
            curses.echo()
            try:
                curses.curs_set(1)
            except curses.error:
                pass
        finally:
            self._screen = None
            curses.endwin()

    def read_event(self) -> TerminalEvent:
        try:
            raw = self._screen.get_wch()
        except curses.error as e:
            raise TerminalError("Failed to read terminal input", operation="read", original_error=e)

        if raw == ESC:
            follow = self._read_pending()
            if follow is not None:
                event = decode_alt_key(follow)
                if isinstance(event, KeyEvent):
                    return event
        return decode_key(raw)

    def _read_pending(self) -> Optional[Union[int, str]]:
        """Return the next input if it is already waiting, without blocking."""
        self._screen.nodelay(True)
        try:
            return self._screen.get_wch()
        except curses.error:
            return None
        finally:
            self._screen.nodelay(False)


class TerminalSession:
    """
    Exclusive ownership of the terminal in raw / alternate-screen mode.

    Lifecycle: acquire() once at startup, release() on every exit path.
    release() is safe to call from an error handler even if acquire() failed
    half-way, and only the first call after an acquire attempt reaches the
    device.

    Attributes:
        backend: Device implementation (enter / exit / read_event)
        viewport: Drawing surface, available between acquire() and release()
    """

    def __init__(self, backend=None):
        self.backend = backend if backend is not None else CursesBackend()
        self.viewport = None
        self._engaged = False

    @property
    def is_active(self) -> bool:
        return self._engaged

    def acquire(self):
        if self._engaged:
            raise TerminalError("Terminal is already acquired", operation="acquire")

        # Mark before entering so a half-finished acquire is still restored
        self._engaged = True
        self.viewport = self.backend.enter()
        log_session_acquired(self.viewport.width, self.viewport.height)
        return self.viewport

    def release(self) -> None:
        if not self._engaged:
            return
        self._engaged = False
        self.viewport = None

        clean = True
        try:
            self.backend.exit()
        except Exception as e:
            # Best effort: release runs on shutdown paths
            _log_warning(f"Failed to restore terminal: {e}")
            clean = False
        log_session_released(clean)

    def read_event(self) -> TerminalEvent:
        if not self._engaged or self.viewport is None:
            raise TerminalError("Terminal is not acquired", operation="read")
        event = self.backend.read_event()
        _log_debug(f"Input event: {event}")
        return event

    def __enter__(self) -> "TerminalSession":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

