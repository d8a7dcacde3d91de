"""Unit tests for TerminalSession acquire / release semantics and curses input reading."""

import curses

import pytest

from conftest import FakeBackend, key
from resume_tui.contexts.terminal.exceptions import TerminalError
from resume_tui.contexts.terminal.keys import KeyCode, KeyEvent, KeyModifiers, translate_key
from resume_tui.contexts.terminal.lifecycle import CursesBackend, TerminalSession
from resume_tui.contexts.viewer.events import NavigationEvent


@pytest.mark.unit
def test_acquire_returns_viewport(calls):
    """Test acquire enters the backend and exposes its surface."""
    backend = FakeBackend(calls=calls)
    session = TerminalSession(backend)

    viewport = session.acquire()

    assert viewport is backend.surface
    assert session.viewport is viewport
    assert session.is_active
    assert calls == ["enter"]


@pytest.mark.unit
def test_release_is_idempotent(calls):
    """Test only the first release reaches the device."""
    session = TerminalSession(FakeBackend(calls=calls))
    session.acquire()

    session.release()
    session.release()
    session.release()

    assert calls == ["enter", "exit"]
    assert not session.is_active
    assert session.viewport is None


@pytest.mark.unit
def test_release_without_acquire_is_noop(calls):
    """Test release before acquire does not touch the device."""
    session = TerminalSession(FakeBackend(calls=calls))
    session.release()
    assert calls == []


@pytest.mark.unit
def test_half_finished_acquire_is_still_restored(calls):
    """Test a failed acquire leaves the session releasable exactly once."""
    session = TerminalSession(FakeBackend(calls=calls, fail_on_enter=True))

    with pytest.raises(TerminalError):
        session.acquire()

    session.release()
    session.release()
    assert calls == ["enter", "exit"]


@pytest.mark.unit
def test_release_failure_is_swallowed(calls):
    """Test errors while restoring are logged, not raised."""
    session = TerminalSession(FakeBackend(calls=calls, fail_on_exit=True))
    session.acquire()

    session.release()

    assert calls == ["enter", "exit"]
    assert not session.is_active


@pytest.mark.unit
def test_double_acquire_rejected():
    """Test the terminal cannot be acquired twice."""
    session = TerminalSession(FakeBackend())
    session.acquire()

    with pytest.raises(TerminalError, match="already acquired"):
        session.acquire()


@pytest.mark.unit
def test_read_event_requires_acquire():
    """Test reading input from an unacquired terminal fails."""
    session = TerminalSession(FakeBackend(events=[key("q")]))

    with pytest.raises(TerminalError, match="not acquired"):
        session.read_event()


@pytest.mark.unit
def test_read_event_delegates_to_backend():
    """Test events come from the backend in order."""
    session = TerminalSession(FakeBackend(events=[key("j"), key("q")]))
    session.acquire()

    assert session.read_event() == key("j")
    assert session.read_event() == key("q")


@pytest.mark.unit
def test_context_manager_releases(calls):
    """Test the session can be used as a context manager."""
    with TerminalSession(FakeBackend(calls=calls)) as session:
        assert session.is_active

    assert calls == ["enter", "exit"]


class ScriptedScreen:
    """Stands in for stdscr: get_wch() replays input, curses.error when none is waiting."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.nodelay_calls = []

    def get_wch(self):
        if not self.keys:
            raise curses.error("no input")
        return self.keys.pop(0)

    def nodelay(self, flag):
        self.nodelay_calls.append(flag)


def _backend_reading(keys):
    backend = CursesBackend()
    backend._screen = ScriptedScreen(keys)
    return backend


@pytest.mark.unit
def test_alt_letter_is_one_event_and_does_not_quit():
    """Test ESC followed by a key is read as Alt+key, which navigates nowhere."""
    backend = _backend_reading(["\x1b", "j", "q"])

    event = backend.read_event()

    assert event == KeyEvent("j", KeyModifiers.ALT)
    assert translate_key(event) is None
    assert backend._screen.nodelay_calls == [True, False]
    assert backend.read_event() == key("q")


@pytest.mark.unit
def test_bare_escape_still_quits():
    """Test ESC with nothing waiting behind it is a plain Esc."""
    backend = _backend_reading(["\x1b"])

    event = backend.read_event()

    assert event == key(KeyCode.ESC)
    assert translate_key(event) is NavigationEvent.QUIT
    assert backend._screen.nodelay_calls == [True, False]


@pytest.mark.unit
def test_alt_arrow_is_ignored():
    """Test Alt+arrow carries the modifier and is not translated."""
    backend = _backend_reading(["\x1b", curses.KEY_DOWN])

    event = backend.read_event()

    assert event == KeyEvent(KeyCode.DOWN, KeyModifiers.ALT)
    assert translate_key(event) is None


@pytest.mark.unit
def test_read_failure_raises_terminal_error():
    """Test a failing blocking read surfaces as TerminalError."""
    backend = _backend_reading([])

    with pytest.raises(TerminalError, match="Failed to read"):
        backend.read_event()
