#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Turn inbound packets into conversation lines."""
import json

from icb import packets

from .util import timestamp


STATUS_CATEGORIES = frozenset([
    'Arrive', 'Boot', 'Depart', 'Help', 'Name', 'No-Beep', 'Notify',
    'Sign-off', 'Sign-on', 'Status', 'Topic', 'Warning',
])

# Number of fields (including the type tag) each packet type needs
REQUIRED_FIELDS = {
    packets.T_OPEN: 3,
    packets.T_PERSONAL: 3,
    packets.T_PROTOCOL: 3,
    packets.T_STATUS: 3,
    packets.T_BEEP: 2,
}


def format_unknown(message, ts):
    # Fields shown double-quoted: ["e", "text"]
    return 'msg_r: %s read: %s' % (ts, json.dumps(list(message), ensure_ascii=False))


def format_status(category, text, ts):
    if category in STATUS_CATEGORIES:
        return '%s: %s ' % (ts, text)
    return "=> Message '%s' received in unknown category '%s'" % (text, category)


def format_message(message, now=None):
    """Format one inbound packet for display.

    Args:
        message: Field sequence from the backend, type tag first
        now (datetime, optional): Time to stamp the line with

    Returns:
        str: The display line. Unknown packet types and packets missing
        fields are rendered with the generic fallback, never raised.
    """
    ts = timestamp(now)
    if not message or not message[0]:
        return format_unknown(message or [], ts)

    packet_type = message[0][0]
    required = REQUIRED_FIELDS.get(packet_type)
    if required is None or len(message) < required:
        return format_unknown(message, ts)

    if packet_type == packets.T_OPEN:
        return '%s <%s> %s' % (ts, message[1], message[2])
    if packet_type == packets.T_PERSONAL:
        return '%s **%s** %s' % (ts, message[1], message[2])
    if packet_type == packets.T_PROTOCOL:
        return '==> Connected to %s on %s' % (message[2], message[1])
    if packet_type == packets.T_STATUS:
        return format_status(message[1], message[2], ts)
    # packets.T_BEEP
    return '%s *%s beeps you*' % (ts, message[1])
