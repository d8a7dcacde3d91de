"""
Navigation vocabulary shared between the runtime loop and the viewer.

NavigationEvent is what a key press means to the viewer. Outcome is what the
viewer answers after applying one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NavigationEvent(Enum):
    """The closed set of actions the viewer understands."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class OutcomeKind(Enum):
    CONTINUE = "continue"
    STOP = "stop"
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome:
    """
    Result of dispatching one NavigationEvent.

    STOP is a normal, successful end of the session and is never reported as an
    error. FAILED carries the exception that caused it.

    Attributes:
        kind: CONTINUE, STOP or FAILED
        reason: Exception behind a FAILED outcome (None otherwise)
    """

    kind: OutcomeKind
    reason: Optional[Exception] = None

    @property
    def should_stop(self) -> bool:
        return self.kind is OutcomeKind.STOP

    @property
    def has_failed(self) -> bool:
        return self.kind is OutcomeKind.FAILED


CONTINUE = Outcome(OutcomeKind.CONTINUE)
STOP = Outcome(OutcomeKind.STOP)


def failed(reason: Exception) -> Outcome:
    """Build a FAILED outcome for the given exception."""
    return Outcome(OutcomeKind.FAILED, reason)
