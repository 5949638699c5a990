#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Single-line input editor with history browsing."""
import logging

from .util import display_width


class LineEditor:
    """Input line being typed, plus cursor and history position.

    Attributes
    ----------
    buffer : `str`
        Text not yet submitted.
    cursor_offset : `int`
        Display columns from the end of `buffer` to the edit position.
        0 puts the cursor at the end.
    history_offset : `int`
        Position in `submissions` counted from the end; 0 means the user
        is editing live input rather than a recalled entry.
    submissions : `list` of `str`
        Previously submitted input, oldest first. Shared with the
        `HistoryStore`, never modified here.
    """
    logger = logging.getLogger(__name__)

    # Control characters as delivered by the terminal in cbreak mode
    CTRL_A = '\x01'
    CTRL_E = '\x05'
    CTRL_W = '\x17'

    KEY_ACTIONS = {
        'KEY_BACKSPACE': 'backspace',
        'KEY_UP': 'history_up',
        'KEY_DOWN': 'history_down',
        'KEY_LEFT': 'left',
        'KEY_RIGHT': 'right',
    }

    CONTROL_ACTIONS = {
        '\x08': 'backspace',
        '\x7f': 'backspace',
        CTRL_W: 'clear',
        CTRL_A: 'home',
        CTRL_E: 'end',
    }

    def __init__(self, submissions):
        self.submissions = submissions
        self.buffer = ''
        self.cursor_offset = 0
        self.history_offset = 0

    @property
    def width(self):
        return display_width(self.buffer)

    @property
    def cursor_column(self):
        """Cursor position in display columns from the start of the line."""
        return self.width - self.cursor_offset

    def _clamp_cursor(self):
        self.cursor_offset = max(0, min(self.cursor_offset, self.width))

    def _insert_index(self):
        return max(0, len(self.buffer) - self.cursor_offset)

    def handle_key(self, key):
        """Apply an editing key.

        Enter is not handled here, see `submit`.

        Args:
            key: blessed `Keystroke` (or plain `str` for printable input)

        Returns:
            bool: True if the key was recognised
        """
        name = getattr(key, 'name', None)
        action = self.KEY_ACTIONS.get(name) or self.CONTROL_ACTIONS.get(str(key))
        if action:
            getattr(self, action)()
            return True

        if getattr(key, 'is_sequence', False) or not str(key).isprintable():
            self.logger.debug('ignoring key %r (%s)', str(key), name)
            return False

        for char in str(key):
            self.insert(char)
        return True

    def backspace(self):
        index = self._insert_index()
        if index == 0:
            return
        self.buffer = self.buffer[:index - 1] + self.buffer[index:]
        self._clamp_cursor()

    def clear(self):
        self.buffer = ''
        self.cursor_offset = 0

    def home(self):
        self.cursor_offset = self.width

    def end(self):
        self.cursor_offset = 0

    def left(self):
        if self.cursor_offset < self.width:
            self.cursor_offset += 1

    def right(self):
        if self.cursor_offset > 0:
            self.cursor_offset -= 1

    def insert(self, char):
        index = self._insert_index()
        self.buffer = self.buffer[:index] + char + self.buffer[index:]

    def history_up(self):
        """Recall the previous submission."""
        self.history_offset += 1
        self.cursor_offset = 0

        count = len(self.submissions)
        if self.history_offset > count or count == 0:
            self.history_offset -= 1
            return

        self.buffer = self.submissions[count - self.history_offset]

    def history_down(self):
        """Move towards newer submissions.

        At the newest recalled entry the input line is cleared but the
        offset is left at 1.
        """
        self.cursor_offset = 0

        count = len(self.submissions)
        if self.history_offset == 0 or count == 0:
            return
        if self.history_offset == 1:
            self.buffer = ''
            return

        self.history_offset -= 1
        self.buffer = self.submissions[count - self.history_offset]

    def submit(self):
        """Reset cursor and history position; return the completed line.

        The buffer itself is left alone: the dispatcher decides whether the
        line was accepted and clears it.
        """
        self.cursor_offset = 0
        self.history_offset = 0
        return self.buffer
