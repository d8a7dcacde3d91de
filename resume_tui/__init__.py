"""
resume_tui - Interactive résumé viewer for the terminal

Renders résumé content into a fixed 120x40 viewport and lets the reader move
between sections with the keyboard.

Architecture:
- Terminal Context: raw mode / alternate screen lifecycle, key decoding, error hooks
- Viewer Context: résumé content model, navigation state, drawing
- Runtime: the render / read / translate / dispatch loop
"""

__version__ = "0.1.0"
