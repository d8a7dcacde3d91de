"""Unit tests for App navigation state and drawing."""

import pytest

from conftest import FIXTURES_PATH, RecordingSurface
from resume_tui.contexts.viewer import layout
from resume_tui.contexts.viewer.app import App, Focus
from resume_tui.contexts.viewer.events import NavigationEvent, OutcomeKind
from resume_tui.contexts.viewer.exceptions import InvalidResumeStructureError, ResumeLoadError
from resume_tui.contexts.viewer.resume_document import ResumeDocument, ResumeEntry

UP = NavigationEvent.UP
DOWN = NavigationEvent.DOWN
LEFT = NavigationEvent.LEFT
RIGHT = NavigationEvent.RIGHT
QUIT = NavigationEvent.QUIT
ABOUT = "About"


@pytest.fixture
def app(resume_yaml):
    return App(ResumeDocument(resume_yaml))


def _press(app, *events):
    return [app.event(nav).kind for nav in events]


@pytest.mark.unit
def test_initial_state(app):
    """Test the viewer starts on the About section menu."""
    assert app.focus is Focus.SECTIONS
    assert app.section_index == 0
    assert app.current_section.name == "About"


@pytest.mark.unit
@pytest.mark.parametrize("focus_path", [[], [RIGHT], [RIGHT, RIGHT]])
def test_quit_stops_from_any_level(app, focus_path):
    """Test QUIT answers STOP whatever is focused."""
    _press(app, *focus_path)
    assert app.event(QUIT).kind is OutcomeKind.STOP


@pytest.mark.unit
def test_section_cursor_clamps(app):
    """Test UP/DOWN in the menu stop at the first and last section."""
    _press(app, UP)
    assert app.section_index == 0

    _press(app, *[DOWN] * 10)
    assert app.section_index == len(app.document.sections) - 1
    assert app.current_section.name == "Interests"


@pytest.mark.unit
def test_left_in_menu_is_noop(app):
    """Test LEFT at the top level changes nothing."""
    assert _press(app, LEFT) == [OutcomeKind.CONTINUE]
    assert app.focus is Focus.SECTIONS


@pytest.mark.unit
def test_open_section_and_entry(app):
    """Test RIGHT walks sections -> entries -> detail and LEFT walks back."""
    _press(app, DOWN, RIGHT)
    assert app.focus is Focus.ENTRIES
    assert app.current_entry.title == "Acme Corp"

    _press(app, DOWN, DOWN)
    assert app.entry_index == 1
    assert app.current_entry.title == "Globex"

    _press(app, RIGHT)
    assert app.focus is Focus.DETAIL

    _press(app, RIGHT)
    assert app.focus is Focus.DETAIL

    _press(app, LEFT)
    assert app.focus is Focus.ENTRIES
    assert app.entry_index == 1

    _press(app, LEFT)
    assert app.focus is Focus.SECTIONS
    assert app.section_index == 1


@pytest.mark.unit
def test_reopening_section_resets_entry_cursor(app):
    """Test entering a section always starts at its first entry."""
    _press(app, DOWN, RIGHT, DOWN, LEFT, RIGHT)
    assert app.entry_index == 0


@pytest.mark.unit
def test_right_on_empty_section_stays(app):
    """Test an empty section cannot be opened."""
    _press(app, DOWN, DOWN)
    assert app.current_section.name == "Empty"

    assert _press(app, RIGHT) == [OutcomeKind.CONTINUE]
    assert app.focus is Focus.SECTIONS


@pytest.mark.unit
def test_include_loaded_on_open(app):
    """Test opening an included section loads it."""
    _press(app, DOWN, DOWN, DOWN)
    assert not app.current_section.is_loaded

    _press(app, RIGHT)
    assert app.focus is Focus.ENTRIES
    assert app.current_entry.title == "widget"


@pytest.mark.unit
def test_missing_include_fails():
    """Test a load error while opening a section is answered with FAILED."""
    app = App(ResumeDocument(FIXTURES_PATH / "resume_missing_include.yaml"))

    outcome = app.event(DOWN)
    assert outcome.kind is OutcomeKind.CONTINUE

    outcome = app.event(RIGHT)
    assert outcome.has_failed
    assert isinstance(outcome.reason, ResumeLoadError)
    assert app.focus is Focus.SECTIONS


@pytest.mark.unit
def test_detail_scroll_clamps():
    """Test detail scrolling stops at the top and at the last page."""
    items = [f"Bullet number {i}" for i in range(layout.BODY_ROWS + 5)]
    doc = ResumeDocument.from_dict(
        {
            "document": {
                "metadata": {"name": "X"},
                "sections": [{"name": "Long", "type": "generic", "subsections": [{"title": "Big", "items": items}]}],
            }
        }
    )
    app = App(doc)
    _press(app, DOWN, RIGHT, RIGHT)
    assert app.focus is Focus.DETAIL

    _press(app, UP)
    assert app.scroll == 0

    _press(app, *[DOWN] * 50)
    assert app.scroll == app.max_scroll == 5

    _press(app, LEFT)
    assert app.scroll == 0


@pytest.mark.unit
def test_tick_draws_and_presents(app):
    """Test tick redraws the header, menu and footer and presents once."""
    surface = RecordingSurface()

    app.tick(surface)

    assert surface.presents == 1
    assert "Test Person" in surface.row(0)
    assert "Platform Engineer" in surface.row(1)
    assert "About" in surface.row(5)
    assert "Experience" in surface.row(6)
    assert "q/Esc quit" in surface.row(39)
    assert surface.styles[(5, 1)] == "selected"


@pytest.mark.unit
def test_tick_shows_entries_and_detail(app):
    """Test the right pane follows the focus level."""
    surface = RecordingSurface()
    _press(app, DOWN, RIGHT)
    app.tick(surface)

    screen = surface.text()
    assert "Acme Corp" in screen
    assert "Staff Engineer · 2020 - Present · Remote" in screen
    assert surface.styles[(6, 1)] == "accent"

    _press(app, RIGHT)
    app.tick(surface)
    screen = surface.text()
    assert "• Led the migration to event sourcing." in screen
    assert "←/h back" in surface.row(39)


@pytest.mark.unit
def test_tick_placeholder_for_unloaded_include(app):
    """Test an unopened include is announced rather than loaded by drawing."""
    surface = RecordingSurface()
    _press(app, DOWN, DOWN, DOWN)
    app.tick(surface)

    assert "Loaded from projects_test.yaml when opened" in surface.text()
    assert not app.current_section.is_loaded


@pytest.mark.unit
def test_entry_meta_line_skips_blanks():
    """Test meta line joins only the parts that are present."""
    assert ResumeEntry(title="T", dates="2020").meta_line == "2020"
    assert ResumeEntry(title="T").meta_line == ""


@pytest.mark.unit
def test_malformed_include_fails():
    """Test a malformed include is answered with FAILED rather than raised."""
    app = App(ResumeDocument(FIXTURES_PATH / "resume_malformed_include.yaml"))

    _press(app, DOWN)
    outcome = app.event(RIGHT)

    assert outcome.has_failed
    assert isinstance(outcome.reason, InvalidResumeStructureError)
    assert app.focus is Focus.SECTIONS


@pytest.mark.unit
def test_menu_scrolls_to_keep_selection_visible():
    """Test the section menu follows the cursor past the last visible row."""
    sections = [{"name": f"S{i:02d}", "type": "list", "items": ["x"]} for i in range(40)]
    app = App(ResumeDocument.from_dict({"document": {"metadata": {"name": "X"}, "sections": sections}}))
    surface = RecordingSurface()

    _press(app, *[DOWN] * 40)
    app.tick(surface)

    assert app.current_section.name == "S39"
    assert surface.row(layout.BODY_BOTTOM)[: layout.MENU_WIDTH].strip() == "S39"
    assert surface.styles[(layout.BODY_BOTTOM, 1)] == "selected"
    assert surface.row(layout.MENU_TOP)[: layout.MENU_WIDTH].strip() == "S07"

    _press(app, *[UP] * 40)
    app.tick(surface)
    assert surface.row(layout.MENU_TOP)[: layout.MENU_WIDTH].strip() == ABOUT
