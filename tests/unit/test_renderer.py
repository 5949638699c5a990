"""
Unit tests for tui/renderer.py

Tests the screen layout and what gets written to the terminal.
"""
import pytest
from unittest.mock import Mock

from tui.renderer import (
    TerminalRenderer, cursor_position, history_capacity, layout
)


pytestmark = pytest.mark.unit


def fake_term(width=30, height=10):
    term = Mock()
    term.width = width
    term.height = height
    term.move_xy = lambda x, y: '<%d,%d>' % (x, y)
    term.black_on_cyan = lambda text: '[H]' + text
    term.bright_black = lambda text: '[B]' + text
    return term


class TestHistoryCapacity:
    """Test how many history lines fit"""

    def test_capacity(self):
        assert history_capacity(24) == 19

    def test_tiny_terminal(self):
        assert history_capacity(3) == 0


class TestLayout:
    """Test row layout"""

    def test_row_count_and_width(self, state):
        rows = layout(30, 10, state.identity, state.history, state.editor)
        assert len(rows) == 10
        assert all(len(text) == 30 for _, text in rows)

    def test_regions(self, state):
        kinds = [kind for kind, _ in layout(30, 10, state.identity,
                                            state.history, state.editor)]
        assert kinds[0] == 'header'
        assert kinds[1] == 'border'
        assert kinds[-3:] == ['border', 'input', 'blank']

    def test_header_shows_group(self, state):
        rows = layout(30, 10, state.identity, state.history, state.editor)
        assert rows[0][1].strip() == 'Group: pub'

    def test_margin(self, state):
        state.editor.buffer = 'typed'
        rows = layout(30, 10, state.identity, state.history, state.editor)
        assert rows[-2][1].startswith(' typed')

    def test_shows_most_recent_lines_in_order(self, state):
        for i in range(20):
            state.history.add_line('line %d' % i)
        rows = layout(30, 10, state.identity, state.history, state.editor)
        shown = [text.strip() for kind, text in rows if kind == 'history']
        assert shown == ['line 15', 'line 16', 'line 17', 'line 18', 'line 19']

    def test_short_history_padded(self, state):
        state.history.add_line('only line')
        rows = layout(30, 10, state.identity, state.history, state.editor)
        assert rows[2] == ('history', ' only line' + ' ' * 20)
        assert rows[3][0] == 'blank'
        assert len(rows) == 10

    def test_long_lines_truncated(self, state):
        state.history.add_line('x' * 100)
        rows = layout(30, 10, state.identity, state.history, state.editor)
        assert rows[2][1] == ' ' + 'x' * 28 + ' '


class TestCursorPosition:
    """Test cursor placement in the input line"""

    def test_end_of_input(self, state):
        state.editor.buffer = 'hello'
        assert cursor_position(30, 10, state.editor) == (6, 8)

    def test_moved_left(self, state):
        state.editor.buffer = 'hello'
        state.editor.left()
        state.editor.left()
        assert cursor_position(30, 10, state.editor) == (4, 8)

    def test_wide_glyphs(self, state):
        state.editor.buffer = '日本'
        assert cursor_position(30, 10, state.editor) == (5, 8)

    def test_clamped_to_width(self, state):
        state.editor.buffer = 'x' * 100
        assert cursor_position(30, 10, state.editor) == (29, 8)


class TestTerminalRenderer:
    """Test drawing through blessed"""

    def test_draw_writes_every_row(self, state, capsys):
        renderer = TerminalRenderer(fake_term())
        renderer.draw(state)
        out = capsys.readouterr().out
        for y in range(10):
            assert '<0,%d>' % y in out
        assert '[H] Group: pub' in out
        assert out.count('[B]') == 2

    def test_place_cursor(self, state, capsys):
        state.editor.buffer = 'abc'
        renderer = TerminalRenderer(fake_term())
        renderer.place_cursor(state)
        assert capsys.readouterr().out == '<4,8>'

    def test_draw_errors_propagate(self, state):
        term = fake_term()
        term.move_xy = Mock(side_effect=OSError('terminal gone'))
        with pytest.raises(OSError):
            TerminalRenderer(term).draw(state)
