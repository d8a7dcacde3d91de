"""Theme definitions for the résumé viewer.

Central place for color pair ids and the mapping from the style names used by
the layout code to curses attributes.
"""

import curses
from typing import Dict, Tuple

# Named color-pair ids
NORMAL: int = 1
TITLE: int = 2
ACCENT: int = 3
SELECTED: int = 4
DIM: int = 5
BORDER: int = 6

# Default theme: mapping of curses color pair id -> (fg_color, bg_color)
# -1 keeps the terminal's own background.
DEFAULT_THEME: Dict[int, Tuple[int, int]] = {
    NORMAL: (-1, -1),
    TITLE: (curses.COLOR_CYAN, -1),
    ACCENT: (curses.COLOR_YELLOW, -1),
    SELECTED: (curses.COLOR_BLACK, curses.COLOR_CYAN),
    DIM: (curses.COLOR_WHITE, -1),
    BORDER: (curses.COLOR_BLUE, -1),
}

STYLE_PAIRS: Dict[str, int] = {
    "normal": NORMAL,
    "title": TITLE,
    "accent": ACCENT,
    "selected": SELECTED,
    "dim": DIM,
    "border": BORDER,
}

# Box-drawing characters
HOR = "─"
VERT = "│"

# Scroll indicators
SCROLL_UP = "▲"
SCROLL_DOWN = "▼"


def init_theme() -> Dict[str, int]:
    """
    Initialise color pairs and return style name -> curses attribute.

    Must be called after curses.initscr(). Terminals without color support get
    plain attributes (bold / reverse / dim) instead.
    """
    if not curses.has_colors():
        return {
            "normal": curses.A_NORMAL,
            "title": curses.A_BOLD,
            "accent": curses.A_BOLD,
            "selected": curses.A_REVERSE,
            "dim": curses.A_DIM,
            "border": curses.A_NORMAL,
        }

    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        pass

    for pair_id, (fg, bg) in DEFAULT_THEME.items():
        try:
            curses.init_pair(pair_id, fg, bg)
        except curses.error:
            # Terminals without default-color support reject -1
            curses.init_pair(
                pair_id,
                fg if fg >= 0 else curses.COLOR_WHITE,
                bg if bg >= 0 else curses.COLOR_BLACK,
            )

    attrs = {name: curses.color_pair(pair_id) for name, pair_id in STYLE_PAIRS.items()}
    attrs["title"] |= curses.A_BOLD
    attrs["selected"] |= curses.A_BOLD
    attrs["dim"] |= curses.A_DIM
    return attrs
