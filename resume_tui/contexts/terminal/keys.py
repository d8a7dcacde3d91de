"""
Key model, curses key decoding and key -> NavigationEvent translation.

decode_key() turns whatever curses' get_wch() returned into a KeyEvent (or a
ResizeEvent). translate_key() maps a KeyEvent onto the viewer's navigation
vocabulary and is the only place key bindings live.

Bindings (case-sensitive):
    q / Esc (any modifiers)        -> QUIT
    Ctrl+c                         -> QUIT
    h / Left                       -> LEFT
    j / Down                       -> DOWN
    k / Up                         -> UP
    l / Right / Enter              -> RIGHT
"""

import curses
from dataclasses import dataclass
from enum import Enum, Flag
from typing import Optional, Union

from resume_tui.contexts.viewer.events import NavigationEvent


class KeyCode(Enum):
    """Special (non-character) keys."""

    ENTER = "enter"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TAB = "tab"
    BACKSPACE = "backspace"
    UNKNOWN = "unknown"


class KeyModifiers(Flag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


class KeyEventKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """
    A single keyboard event.

    Attributes:
        code: One-character string for printable keys, KeyCode otherwise
        modifiers: Modifier keys held during the event
        kind: Press, repeat or release
    """

    code: Union[str, KeyCode]
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class ResizeEvent:
    """Terminal size changed. The viewport is fixed, so the loop ignores it."""


TerminalEvent = Union[KeyEvent, ResizeEvent]


_CURSES_KEYS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
    curses.KEY_ENTER: KeyCode.ENTER,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
}

_CONTROL_CHARS = {
    "\x1b": KeyCode.ESC,
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\t": KeyCode.TAB,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}

_NAVIGATION_KEYS = {
    "h": NavigationEvent.LEFT,
    KeyCode.LEFT: NavigationEvent.LEFT,
    "j": NavigationEvent.DOWN,
    KeyCode.DOWN: NavigationEvent.DOWN,
    "k": NavigationEvent.UP,
    KeyCode.UP: NavigationEvent.UP,
    "l": NavigationEvent.RIGHT,
    KeyCode.RIGHT: NavigationEvent.RIGHT,
    KeyCode.ENTER: NavigationEvent.RIGHT,
}


def decode_key(raw: Union[int, str]) -> TerminalEvent:
    """
    Decode one get_wch() result.

    In raw mode Ctrl+<letter> arrives as the control character itself
    (Ctrl+c is "\\x03"), so control characters that are not named keys are
    turned back into letter + CONTROL.

    Args:
        raw: int for curses function keys, str for characters

    Returns:
        KeyEvent (always kind PRESS; curses does not report releases) or ResizeEvent
    """
    if isinstance(raw, int):
        if raw == curses.KEY_RESIZE:
            return ResizeEvent()
        return KeyEvent(_CURSES_KEYS.get(raw, KeyCode.UNKNOWN))

    if raw in _CONTROL_CHARS:
        return KeyEvent(_CONTROL_CHARS[raw])

    if len(raw) == 1 and 1 <= ord(raw) <= 26:
        letter = chr(ord("a") + ord(raw) - 1)
        return KeyEvent(letter, KeyModifiers.CONTROL)

    return KeyEvent(raw)


def decode_alt_key(raw: Union[int, str]) -> TerminalEvent:
    """
    Decode the key that arrived right after an ESC byte.

    Terminals send Alt+<key> as ESC followed by the key, so the pair is one
    event with ALT added. A resize in that slot is returned as is.
    """
    event = decode_key(raw)
    if isinstance(event, ResizeEvent):
        return event
    return KeyEvent(event.code, event.modifiers | KeyModifiers.ALT, event.kind)


def translate_key(event: KeyEvent) -> Optional[NavigationEvent]:
    """
    Map a key event to a NavigationEvent.

    Args:
        event: Decoded key event

    Returns:
        The navigation event, or None when the key is not bound (or the event
        is not a press)
    """
    if event.kind is not KeyEventKind.PRESS:
        return None

    if event.code in ("q", KeyCode.ESC):
        return NavigationEvent.QUIT

    if event.code == "c" and event.modifiers == KeyModifiers.CONTROL:
        return NavigationEvent.QUIT

    if event.modifiers != KeyModifiers.NONE:
        return None

    return _NAVIGATION_KEYS.get(event.code)
