#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Commands the front-end hands to the network worker."""
from collections import namedtuple

from . import packets


class Open(namedtuple('Open', 'text')):
    """Open message to everybody in the current group."""
    __slots__ = ()

    def to_packet(self):
        return packets.encode(packets.T_OPEN, self.text)


class Personal(namedtuple('Personal', 'recipient text')):
    """Private message to a single user."""
    __slots__ = ()

    def to_packet(self):
        return packets.encode(packets.T_COMMAND, 'm',
                              '%s %s' % (self.recipient, self.text))


class Beep(namedtuple('Beep', 'recipient')):
    """Beep another user."""
    __slots__ = ()

    def to_packet(self):
        return packets.encode(packets.T_COMMAND, 'beep', self.recipient)


class Name(namedtuple('Name', 'nickname')):
    """Change our own nickname."""
    __slots__ = ()

    def to_packet(self):
        return packets.encode(packets.T_COMMAND, 'name', self.nickname)

