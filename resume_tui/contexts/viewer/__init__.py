"""
Viewer Context

Responsibilities:
- Loads résumé content from YAML
- Tracks the selected section / entry and the detail scroll position
- Draws the current state onto the terminal surface

Owns: résumé content model, navigation state, layout
Never: Touches the terminal device directly
"""
