"""Shared fakes and fixtures for viewer tests (no real terminal needed)."""

from pathlib import Path

import pytest

from resume_tui.contexts.terminal.exceptions import TerminalError
from resume_tui.contexts.terminal.keys import KeyCode, KeyEvent, KeyModifiers
from resume_tui.contexts.viewer.events import CONTINUE, STOP, NavigationEvent

FIXTURES_PATH = Path(__file__).parent / "fixtures"


class RecordingSurface:
    """120x40 character grid that remembers what was drawn."""

    def __init__(self, width: int = 120, height: int = 40):
        self.width = width
        self.height = height
        self.presents = 0
        self.clear()

    def clear(self) -> None:
        self.grid = [[" "] * self.width for _ in range(self.height)]
        self.styles = {}

    def draw_text(self, y: int, x: int, text: str, style: str = "normal") -> None:
        if y < 0 or y >= self.height or x < 0 or x >= self.width:
            return
        for offset, char in enumerate(text[: self.width - x]):
            self.grid[y][x + offset] = char
        self.styles[(y, x)] = style

    def present(self) -> None:
        self.presents += 1

    def row(self, y: int) -> str:
        return "".join(self.grid[y]).rstrip()

    def text(self) -> str:
        return "\n".join(self.row(y) for y in range(self.height))


class FakeBackend:
    """
    Terminal backend that replays scripted events and records device calls.

    Items in `events` that are exceptions are raised from read_event().
    """

    def __init__(self, events=(), calls=None, fail_on_enter=False, fail_on_exit=False):
        self.events = list(events)
        self.calls = calls if calls is not None else []
        self.fail_on_enter = fail_on_enter
        self.fail_on_exit = fail_on_exit
        self.surface = RecordingSurface()

    def enter(self):
        self.calls.append("enter")
        if self.fail_on_enter:
            raise TerminalError("raw mode not supported", operation="acquire")
        return self.surface

    def exit(self):
        self.calls.append("exit")
        if self.fail_on_exit:
            raise OSError("tty went away")

    def read_event(self):
        self.calls.append("read")
        if not self.events:
            raise AssertionError("scripted input exhausted")
        event = self.events.pop(0)
        if isinstance(event, BaseException):
            raise event
        return event


class FakeApp:
    """Application double: records ticks and dispatched navigation events."""

    def __init__(self, outcomes=None, calls=None, tick_error=None):
        self.outcomes = outcomes or {}
        self.calls = calls if calls is not None else []
        self.tick_error = tick_error
        self.ticks = 0
        self.dispatched = []

    def tick(self, surface) -> None:
        self.ticks += 1
        self.calls.append("tick")
        if self.tick_error is not None:
            raise self.tick_error

    def event(self, nav: NavigationEvent):
        self.dispatched.append(nav)
        if nav in self.outcomes:
            return self.outcomes[nav]
        return STOP if nav is NavigationEvent.QUIT else CONTINUE


def key(code, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
    """Shorthand for a key press."""
    return KeyEvent(code, modifiers)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def resume_yaml() -> Path:
    return FIXTURES_PATH / "resume_test.yaml"

