#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Turn a completed input line into a command for the server."""
import sys
import logging

from icb import Open, Personal, Beep, Name

from .util import timestamp


logger = logging.getLogger(__name__)


def quit_now():
    """Leave immediately. ICB has no clean way to disconnect other than
    dropping the connection, so the network worker is not told."""
    sys.stdout.flush()
    sys.exit(0)


def dispatch(text, state, now=None):
    """Handle the line the user just entered.

    Plain text becomes an open message. Lines starting with '/' are
    commands:

        /quit
        /msg <nick> <text>  or  /m <nick> <text>
        /beep <nick>
        /name <nick>  or  /nick <nick>

    Unknown commands and commands with the wrong number of arguments are
    ignored and the input line is left untouched so it can be corrected.

    Args:
        text (str): Completed input line
        state (UIState): State to record history and identity changes in
        now (datetime, optional): Time for the history timestamps

    Returns:
        The command to send to the server, or None
    """
    history = state.history
    editor = state.editor
    ts = timestamp(now)

    if not text.startswith('/'):
        # The server doesn't echo our own messages back
        history.add_line('%s: %s' % (ts, text))
        history.add_submission(text)
        editor.clear()
        return Open(text)

    tokens = text.split()
    cmd = tokens[0]

    if cmd == '/quit':
        quit_now()
    elif cmd in ('/msg', '/m') and len(tokens) > 2:
        recipient = tokens[1]
        # Work on the raw line rather than the tokens so any spacing inside
        # the message survives; only the space after the nick is dropped.
        msg_text = text.replace(cmd, '', 1).replace(' %s ' % recipient, '', 1)

        history.add_submission('%s %s %s' % (cmd, recipient, msg_text))
        history.add_line('%s: -> %s: %s' % (ts, recipient, msg_text))
        editor.clear()
        return Personal(recipient, msg_text)
    elif cmd == '/beep' and len(tokens) == 2:
        recipient = tokens[1]

        history.add_submission('%s %s' % (cmd, recipient))
        history.add_line('%s: *beep beep, %s*' % (ts, recipient))
        editor.clear()
        return Beep(recipient)
    elif cmd in ('/name', '/nick') and len(tokens) == 2:
        nickname = tokens[1]

        history.add_submission('%s %s' % (cmd, nickname))
        state.identity.nickname = nickname
        editor.clear()
        return Name(nickname)

    logger.debug('ignoring input %r', text)
    return None
