#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Keyboard and timer events delivered through a single queue.

A reader thread waits for keystrokes and a ticker thread emits a `TICK`
every `tick_rate` seconds, so a consumer blocking on `next()` still wakes
up regularly to redraw and pick up incoming messages.
"""
import queue
import logging
import threading
from collections import namedtuple


KEY = 'key'
TICK = 'tick'

Event = namedtuple('Event', 'kind key')


def key_event(key):
    return Event(KEY, key)


def tick_event():
    return Event(TICK, None)


class InputEvents:
    """Producer threads feeding `Event` objects into a queue.

    Attributes
    ----------
    term : `blessed.Terminal`
        Terminal to read keystrokes from. Must already be in cbreak mode.
    tick_rate : `float`
        Seconds between ticks.
    """
    logger = logging.getLogger(__name__)

    def __init__(self, term, tick_rate=0.25, read_timeout=0.1):
        self.term = term
        self.tick_rate = tick_rate
        self.read_timeout = read_timeout
        self.events = queue.Queue()
        self.stopped = threading.Event()
        self.threads = []

    def start(self):
        for target, name in ((self._read_keys, 'KeyReader'),
                             (self._tick, 'Ticker')):
            thread = threading.Thread(target=target, daemon=True, name=name)
            thread.start()
            self.threads.append(thread)
        self.logger.debug('event threads started (tick %.2fs)', self.tick_rate)
        return self

    def stop(self):
        self.stopped.set()

    def _read_keys(self):
        while not self.stopped.is_set():
            key = self.term.inkey(timeout=self.read_timeout)
            if key:
                self.events.put(key_event(key))

    def _tick(self):
        while not self.stopped.wait(self.tick_rate):
            self.events.put(tick_event())

    def next(self):
        """Block until the next event is available."""
        return self.events.get()

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()
