"""
Main loop of the viewer.

One iteration: render, block for the next terminal event, translate it, hand
the navigation event to the app, act on the outcome. The blocking read is the
only suspension point; there are no timers and no background work.

run() wires the loop to the terminal lifecycle and the error hooks:

    acquire -> loop -> release -> exit 0
       \\________ any exception ______/ -> release -> report -> exit 1
"""

from enum import Enum

from resume_tui.contexts.terminal.hooks import EXIT_SUCCESS, ErrorHooks
from resume_tui.contexts.terminal.keys import KeyEvent, KeyEventKind, translate_key
from resume_tui.contexts.terminal.lifecycle import TerminalSession
from resume_tui.contexts.viewer.exceptions import ApplicationError
from resume_tui.contexts.viewer.logger import _log_debug, _log_info


class LoopState(Enum):
    RUNNING = "running"
    EXITING = "exiting"


def run_event_loop(app, terminal: TerminalSession) -> LoopState:
    """
    Drive the app until it asks to stop.

    Args:
        app: Object with tick(surface) and event(nav) -> Outcome
        terminal: Acquired terminal session

    Returns:
        LoopState.EXITING once the app answered STOP

    Raises:
        ApplicationError: If the app answered FAILED
        TerminalError: If reading input or drawing fails
    """
    state = LoopState.RUNNING

    while state is LoopState.RUNNING:
        app.tick(terminal.viewport)

        event = terminal.read_event()
        if not isinstance(event, KeyEvent) or event.kind is not KeyEventKind.PRESS:
            continue

        nav = translate_key(event)
        if nav is None:
            continue

        outcome = app.event(nav)
        if outcome.should_stop:
            _log_debug(f"{nav.name} -> stop")
            state = LoopState.EXITING
        elif outcome.has_failed:
            raise ApplicationError(outcome.reason) from outcome.reason

    return state


def run(app, terminal: TerminalSession, hooks: ErrorHooks) -> int:
    """
    Run a full viewer session inside the error guard.

    Args:
        app: The application state
        terminal: Unacquired terminal session
        hooks: Error hooks whose restore callback releases `terminal`

    Returns:
        Process exit status (0 on quit, 1 on any fatal error)
    """

    def session() -> int:
        terminal.acquire()
        run_event_loop(app, terminal)
        terminal.release()
        _log_info("Viewer closed")
        return EXIT_SUCCESS

    return hooks.guard(session)
