"""
Viewer application state.

The runtime loop only talks to App through two operations:
    tick(surface)   redraw everything (never blocks)
    event(nav)      apply one NavigationEvent, answer with an Outcome

Navigation is three levels deep: the section menu, the entries of the
selected section, and the detail view of one entry.
"""

from enum import Enum
from typing import Callable, Dict, Optional

from resume_tui.contexts.viewer import layout
from resume_tui.contexts.viewer.events import CONTINUE, STOP, NavigationEvent, Outcome, failed
from resume_tui.contexts.viewer.exceptions import ResumeError
from resume_tui.contexts.viewer.logger import _log_debug, _log_error
from resume_tui.contexts.viewer.resume_document import ResumeDocument, ResumeEntry, ResumeSection


class Focus(Enum):
    SECTIONS = "sections"
    ENTRIES = "entries"
    DETAIL = "detail"


class App:
    """
    Résumé content plus cursor position.

    Attributes:
        document: The résumé being shown
        focus: Which level receives UP / DOWN
        section_index: Selected section in the menu
        entry_index: Selected entry within the section
        scroll: First visible line of the detail view
    """

    def __init__(self, document: ResumeDocument):
        self.document = document
        self.focus = Focus.SECTIONS
        self.section_index = 0
        self.entry_index = 0
        self.scroll = 0
        self._handlers: Dict[Focus, Callable[[NavigationEvent], None]] = {
            Focus.SECTIONS: self._on_sections,
            Focus.ENTRIES: self._on_entries,
            Focus.DETAIL: self._on_detail,
        }

    @property
    def current_section(self) -> ResumeSection:
        return self.document.sections[self.section_index]

    @property
    def current_entry(self) -> Optional[ResumeEntry]:
        entries = self.current_section.entries
        if not entries:
            return None
        return entries[self.entry_index]

    def tick(self, surface) -> None:
        layout.draw(self, surface)
        surface.present()

    def event(self, nav: NavigationEvent) -> Outcome:
        """
        Apply a navigation event.

        Returns:
            STOP for QUIT, FAILED if the section content could not be loaded,
            CONTINUE otherwise
        """
        if nav is NavigationEvent.QUIT:
            return STOP

        try:
            self._handlers[self.focus](nav)
        except ResumeError as e:
            _log_error(f"Failed to handle {nav.name} in section '{self.current_section.name}': {e}")
            return failed(e)

        _log_debug(
            f"{nav.name} -> focus={self.focus.value} section={self.section_index} "
            f"entry={self.entry_index} scroll={self.scroll}"
        )
        return CONTINUE

    # Handlers per focus level

    def _on_sections(self, nav: NavigationEvent) -> None:
        if nav is NavigationEvent.UP:
            self.section_index = max(0, self.section_index - 1)
        elif nav is NavigationEvent.DOWN:
            self.section_index = min(len(self.document.sections) - 1, self.section_index + 1)
        elif nav is NavigationEvent.RIGHT:
            if self.current_section.load_entries():
                self.focus = Focus.ENTRIES
                self.entry_index = 0

    def _on_entries(self, nav: NavigationEvent) -> None:
        if nav is NavigationEvent.UP:
            self.entry_index = max(0, self.entry_index - 1)
        elif nav is NavigationEvent.DOWN:
            self.entry_index = min(len(self.current_section.entries) - 1, self.entry_index + 1)
        elif nav is NavigationEvent.RIGHT:
            self.focus = Focus.DETAIL
            self.scroll = 0
        elif nav is NavigationEvent.LEFT:
            self.focus = Focus.SECTIONS

    def _on_detail(self, nav: NavigationEvent) -> None:
        if nav is NavigationEvent.UP:
            self.scroll = max(0, self.scroll - 1)
        elif nav is NavigationEvent.DOWN:
            self.scroll = min(self.max_scroll, self.scroll + 1)
        elif nav is NavigationEvent.LEFT:
            self.focus = Focus.ENTRIES
            self.scroll = 0

    @property
    def max_scroll(self) -> int:
        entry = self.current_entry
        if entry is None:
            return 0
        return max(0, len(entry.detail_lines(layout.PANE_WIDTH)) - layout.BODY_ROWS)
