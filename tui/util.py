#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from datetime import datetime

from wcwidth import wcswidth, wcwidth


def timestamp(now=None):
    """Return 'now' as 'HH:MM' in local time."""
    return (now or datetime.now()).strftime('%H:%M')


def display_width(text):
    """Number of terminal columns `text` occupies.

    Non-printable characters count as one column so the result never goes
    negative.
    """
    width = wcswidth(text)
    if width < 0:
        return sum(max(wcwidth(char), 1) for char in text)
    return width


def truncate(text, width):
    """Cut `text` so it occupies at most `width` columns."""
    if width <= 0:
        return ''
    if display_width(text) <= width:
        return text

    used = 0
    for index, char in enumerate(text):
        used += max(wcwidth(char), 1)
        if used > width:
            return text[:index]
    return text
