"""
Terminal chat client for ICB (Internet Citizen's Band).

A small full-screen client in the spirit of the classic ICB and IRC clients:

- Live conversation view that keeps the most recent lines on screen
- Single-line input editor with cursor movement and history recall
- /msg, /beep, /name and /quit commands

Usage:
    python -m tui.client -n nick -s server -g group

See tui.client for keybindings.
"""

__version__ = "0.1.0"
