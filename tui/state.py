#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""State owned by the event loop."""
from .editor import LineEditor


class SessionIdentity:
    """Current nickname and group."""

    def __init__(self, nickname, group):
        self.nickname = nickname
        self.group = group

    def __repr__(self):
        return '<SessionIdentity %s in %s>' % (self.nickname, self.group)


class HistoryStore:
    """Conversation as shown plus everything the user has submitted.

    Attributes
    ----------
    lines : `list` of `str`
        Formatted display lines, oldest first. Never edited or trimmed.
    submissions : `list` of `str`
        Raw submitted input (plain messages and normalized commands).
    """

    def __init__(self):
        self.lines = []
        self.submissions = []

    def add_line(self, line):
        self.lines.append(line)

    def add_submission(self, text):
        self.submissions.append(text)

    def tail(self, count):
        """Return the last `count` display lines in chronological order."""
        if count <= 0:
            return []
        return self.lines[-count:]


class UIState:
    """Everything the event loop mutates, in one place.

    Attributes
    ----------
    identity : `SessionIdentity`
    history : `HistoryStore`
    editor : `LineEditor`
        Shares `history.submissions` for Up/Down browsing.
    """

    def __init__(self, nickname, group):
        self.identity = SessionIdentity(nickname, group)
        self.history = HistoryStore()
        self.editor = LineEditor(self.history.submissions)
