"""
Terminal Context

Responsibilities:
- Enters and leaves raw mode and the alternate screen
- Provides the fixed 120x40 drawing surface
- Decodes key presses and translates them into navigation events
- Restores the terminal before any fatal error is reported

Owns: the terminal device, key bindings
Never: Knows what is being displayed
"""
