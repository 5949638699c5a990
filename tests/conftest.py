"""
Shared pytest fixtures for the ICB client test suite.

This file contains fixtures that are available to all test files.
"""
import pytest
from datetime import datetime
from unittest.mock import Mock

from blessed.keyboard import Keystroke

from tui.state import UIState


@pytest.fixture
def now():
    """
    Fixed wall-clock time for timestamped history lines.

    Returns:
        datetime: 09:05 local time, formats as '09:05'
    """
    return datetime(2024, 11, 11, 9, 5, 30)


@pytest.fixture
def state():
    """
    Fresh UI state for nickname 'tester' in group 'pub'.

    Returns:
        UIState: Empty buffers and offsets
    """
    return UIState('tester', 'pub')


@pytest.fixture
def editor(state):
    """The line editor belonging to the `state` fixture."""
    return state.editor


@pytest.fixture
def key():
    """
    Factory for blessed keystrokes.

    Usage:
        key('a'), key('\\x17'), key(name='KEY_UP')

    Returns:
        function: Builds a Keystroke
    """
    def make(ucs='', name=None):
        return Keystroke(ucs=ucs, code=None, name=name)
    return make


@pytest.fixture
def mock_backend():
    """
    Mock icb.Client.

    Returns:
        Mock: try_recv returns None unless a test sets side_effect
    """
    backend = Mock()
    backend.nickname = 'tester'
    backend.try_recv = Mock(return_value=None)
    backend.send = Mock()
    return backend


@pytest.fixture
def mock_renderer():
    """
    Mock TerminalRenderer.

    Returns:
        Mock: draw and place_cursor are recorded
    """
    renderer = Mock()
    renderer.draw = Mock()
    renderer.place_cursor = Mock()
    return renderer


# Pytest configuration helpers


def pytest_configure(config):
    """
    Pytest configuration hook.

    Registers custom markers.
    """
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
