#!/usr/bin/env python3
"""ICB terminal chat client.

Keybindings:
    - Enter: Send message or run command
    - Up/Down: Browse previously sent input
    - Left/Right: Move the cursor
    - Ctrl+A / Ctrl+E: Jump to start / end of the line
    - Ctrl+W: Clear the input line
    - Ctrl+C: Quit

Commands:
    /msg <nick> <text> (or /m), /beep <nick>, /name <nick> (or /nick), /quit

Usage:
    python -m tui.client -n nick -s server -g group
    python -m tui.client config.json
"""
import sys
import time
import logging
import threading

from blessed import Terminal

import icb
from icb.error import ConfigError, IcbError, SocketError

from common import get_config, configure_logger

from .commands import dispatch
from .events import KEY, InputEvents
from .formatting import format_message
from .renderer import TerminalRenderer
from .state import UIState


logger = logging.getLogger(__name__)


class TUIClient:
    """The event loop.

    Every cycle takes at most one message from the backend, redraws the
    screen and then waits for the next key or tick.

    Attributes:
        backend (icb.Client): Network side, polled with `try_recv`
        state (UIState): Input, history and identity; only touched here
        renderer (TerminalRenderer): Draws `state`
        events (InputEvents): Blocking source of key and tick events
    """
    logger = logging.getLogger(__name__)

    REDRAW_DELAY = 0.001
    ENTER_KEYS = ('\n', '\r')

    def __init__(self, backend, state, renderer, events, sleep=time.sleep):
        self.backend = backend
        self.state = state
        self.renderer = renderer
        self.events = events
        self.sleep = sleep

    def receive(self):
        """Move one pending inbound message into the history, if any.

        Returns:
            bool: True if a message was consumed
        """
        message = self.backend.try_recv()
        if message is None:
            return False
        self.state.history.add_line(format_message(message))
        return True

    def submit(self):
        text = self.state.editor.submit()
        command = dispatch(text, self.state)
        if command is None:
            return None

        # Raises BackendError once the network worker is gone
        self.backend.send(command)
        if isinstance(command, icb.Name):
            self.backend.nickname = command.nickname
        return command

    def handle_event(self, event):
        if event.kind != KEY:
            return
        key = event.key
        if getattr(key, 'name', None) == 'KEY_ENTER' or str(key) in self.ENTER_KEYS:
            self.submit()
        else:
            self.state.editor.handle_key(key)

    def redraw(self):
        self.renderer.draw(self.state)
        self.renderer.place_cursor(self.state)

    def run_cycle(self):
        self.receive()
        self.sleep(self.REDRAW_DELAY)
        self.redraw()
        self.handle_event(self.events.next())

    def run(self):
        """Run until `/quit` exits the process or an error escapes."""
        while True:
            self.run_cycle()


def run_client(conf, kwargs):
    config = icb.Config(**kwargs)
    backend, server = icb.init(config)

    worker = threading.Thread(target=server.run, daemon=True,
                              name='NetworkWorker')
    worker.start()

    term = Terminal()
    state = UIState(config.nickname, config.group)

    with term.fullscreen(), term.cbreak():
        events = InputEvents(term, tick_rate=conf.get('tick_rate', 0.25))
        events.start()
        try:
            TUIClient(backend, state, TerminalRenderer(term), events).run()
        finally:
            events.stop()
            print(term.normal, end='', flush=True)


def main(argv=None):
    """Main entry point.

    Returns:
        int: Exit code (0 for success, 1 for error)
    """
    try:
        conf, kwargs = get_config(argv)
    except ConfigError as ex:
        print('error: %s' % ex, file=sys.stderr)
        return 1

    configure_logger(
        logging.getLogger(),
        log_file=conf.get('log_file'),
        log_format='[%(asctime).19s] [%(name)s] [%(levelname)s] %(message)s',
        log_level=getattr(logging, conf.get('log_level', 'info').upper())
    )
    logger.info('starting as %s on %s:%s', kwargs['nickname'],
                kwargs['serverip'], kwargs['port'])

    try:
        run_client(conf, kwargs)
        return 0
    except KeyboardInterrupt:
        return 0
    except (IcbError, SocketError, OSError) as ex:
        logger.exception('fatal error')
        print('\nFatal error: %s' % ex, file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
