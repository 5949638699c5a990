#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Screen layout and drawing.

Layout::

     Group: <group>                        header, 1 row
    ──────────────────────────────────     history border
     12:01 <alice> hi                      as many of the most recent
     12:02 **bob** psst                    history lines as fit
    ──────────────────────────────────     input border
     typed text_                           input line
                                           spare row

One column is kept free on both sides.
"""
from .util import display_width, truncate


HEADER_ROWS = 1
HISTORY_CHROME = 2  # top border + bottom margin of the history region
INPUT_ROWS = 3
INPUT_CHROME = 2    # top border + spare row of the input region
MARGIN = 1
BORDER = '─'


def history_capacity(height):
    """Number of history lines that fit on a terminal `height` rows tall."""
    return max(0, height - HEADER_ROWS - HISTORY_CHROME - INPUT_CHROME)


def _row(text, width):
    inner = width - 2 * MARGIN
    text = truncate(text, inner)
    return ' ' * MARGIN + text + ' ' * (width - MARGIN - display_width(text))


def _border(width):
    return _row(BORDER * width, width)


def layout(width, height, identity, history, editor):
    """Compute every screen row.

    Args:
        width (int): Terminal columns
        height (int): Terminal rows
        identity (SessionIdentity): Shown in the header
        history (HistoryStore): Conversation lines
        editor (LineEditor): Current input

    Returns:
        list: ``(kind, text)`` for each of the `height` rows, where kind is
        one of 'header', 'border', 'history', 'input' or 'blank'
    """
    rows = [('header', _row('Group: %s' % identity.group, width))]

    history_rows = history_capacity(height)
    visible = history.tail(history_rows)
    rows.append(('border', _border(width)))
    for line in visible:
        rows.append(('history', _row(line, width)))
    rows.extend([('blank', ' ' * width)] * (history_rows - len(visible)))

    rows.append(('border', _border(width)))
    rows.append(('input', _row(editor.buffer, width)))
    rows.append(('blank', ' ' * width))

    return rows[:height]


def cursor_position(width, height, editor):
    """Screen (x, y) of the input cursor."""
    x = MARGIN + editor.cursor_column
    return min(x, max(0, width - 1)), max(0, height - 2)


class TerminalRenderer:
    """Draws `layout` output with blessed.

    Errors writing to the terminal are not caught: a terminal in an unknown
    state cannot be recovered from.
    """

    def __init__(self, term):
        self.term = term

    def styles(self):
        return {
            'header': self.term.black_on_cyan,
            'border': self.term.bright_black,
        }

    def draw(self, state):
        width, height = self.term.width, self.term.height
        styles = self.styles()

        output = []
        for y, (kind, text) in enumerate(layout(width, height, state.identity,
                                                state.history, state.editor)):
            style = styles.get(kind)
            output.append(self.term.move_xy(0, y) + (style(text) if style else text))

        print(''.join(output), end='', flush=True)

    def place_cursor(self, state):
        x, y = cursor_position(self.term.width, self.term.height, state.editor)
        print(self.term.move_xy(x, y), end='', flush=True)
