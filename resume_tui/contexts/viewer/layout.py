"""
Drawing of the viewer state onto a fixed-size surface.

Layout (120 x 40):

    rows 0-2   header: name, brand, contact line
    row  3     rule
    rows 4-37  section menu (left, 28 cols) | content pane (right)
    row  38    rule
    row  39    key help

The surface is anything with width / height / clear() / draw_text() /
present(); the real one is CursesViewport, tests use a recording fake.
"""

from typing import TYPE_CHECKING

from resume_tui.contexts.terminal import theme as THEME

if TYPE_CHECKING:
    from resume_tui.contexts.viewer.app import App

MENU_WIDTH = 28
PANE_LEFT = MENU_WIDTH + 4
PANE_WIDTH = 120 - PANE_LEFT - 2
BODY_TOP = 7
BODY_BOTTOM = 37
BODY_ROWS = BODY_BOTTOM - BODY_TOP + 1
MENU_TOP = 5
MENU_ROWS = BODY_BOTTOM - MENU_TOP + 1
ENTRY_TITLE_WIDTH = 40

FOOTER_HELP = {
    "sections": "↑/k ↓/j select section   →/l/Enter open   q/Esc quit",
    "entries": "↑/k ↓/j select entry   →/l/Enter details   ←/h back   q/Esc quit",
    "detail": "↑/k ↓/j scroll   ←/h back   q/Esc quit",
}


def draw(app: "App", surface) -> None:
    """Redraw the whole viewport from the current app state."""
    surface.clear()
    _draw_header(app, surface)
    _draw_menu(app, surface)
    _draw_pane(app, surface)
    _draw_footer(app, surface)


def _draw_header(app: "App", surface) -> None:
    doc = app.document
    surface.draw_text(0, 2, doc.name, "title")
    if doc.brand:
        surface.draw_text(1, 2, doc.brand, "accent")
    if doc.contact:
        surface.draw_text(2, 2, doc.contact_line, "dim")
    surface.draw_text(3, 0, THEME.HOR * surface.width, "border")


def _draw_menu(app: "App", surface) -> None:
    # Keep the selected section on screen
    first = max(0, app.section_index - MENU_ROWS + 1)
    for row, section in enumerate(app.document.sections[first : first + MENU_ROWS]):
        i = first + row
        y = MENU_TOP + row
        label = f" {section.name}"[: MENU_WIDTH - 1].ljust(MENU_WIDTH - 1)
        if i == app.section_index:
            style = "selected" if app.focus.value == "sections" else "accent"
            surface.draw_text(y, 1, label, style)
        else:
            surface.draw_text(y, 1, label, "normal")

    for y in range(4, BODY_BOTTOM + 1):
        surface.draw_text(y, MENU_WIDTH + 1, THEME.VERT, "border")


def _draw_pane(app: "App", surface) -> None:
    focus = app.focus.value
    if focus == "detail":
        _draw_detail(app, surface)
        return

    section = app.current_section
    surface.draw_text(5, PANE_LEFT, section.name, "title")

    if not section.is_loaded:
        surface.draw_text(BODY_TOP, PANE_LEFT, f"Loaded from {section.include_path.name} when opened", "dim")
        return

    entries = section.entries
    if not entries:
        surface.draw_text(BODY_TOP, PANE_LEFT, "(No content)", "dim")
        return

    # Keep the cursor on screen
    first = max(0, app.entry_index - BODY_ROWS + 1) if focus == "entries" else 0
    for row, entry in enumerate(entries[first : first + BODY_ROWS]):
        index = first + row
        y = BODY_TOP + row
        title = entry.title[: ENTRY_TITLE_WIDTH - 1]
        if focus == "entries" and index == app.entry_index:
            surface.draw_text(y, PANE_LEFT, title.ljust(ENTRY_TITLE_WIDTH), "selected")
        else:
            surface.draw_text(y, PANE_LEFT, title, "normal")
        if entry.meta_line:
            surface.draw_text(y, PANE_LEFT + ENTRY_TITLE_WIDTH + 1, entry.meta_line[: PANE_WIDTH - ENTRY_TITLE_WIDTH - 1], "dim")


def _draw_detail(app: "App", surface) -> None:
    entry = app.current_entry
    surface.draw_text(5, PANE_LEFT, entry.title, "title")

    lines = entry.detail_lines(PANE_WIDTH)
    for row, line in enumerate(lines[app.scroll : app.scroll + BODY_ROWS]):
        surface.draw_text(BODY_TOP + row, PANE_LEFT, line, "normal")

    if app.scroll > 0:
        surface.draw_text(BODY_TOP, PANE_LEFT + PANE_WIDTH + 1, THEME.SCROLL_UP, "accent")
    if app.scroll + BODY_ROWS < len(lines):
        surface.draw_text(BODY_BOTTOM, PANE_LEFT + PANE_WIDTH + 1, THEME.SCROLL_DOWN, "accent")


def _draw_footer(app: "App", surface) -> None:
    surface.draw_text(surface.height - 2, 0, THEME.HOR * surface.width, "border")
    surface.draw_text(surface.height - 1, 2, FOOTER_HELP[app.focus.value], "dim")
