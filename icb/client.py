#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Network side of the ICB client.

`init` returns a (`Client`, `Server`) pair sharing two queues. The `Server`
owns the socket and is meant to run in its own thread; the `Client` is the
handle the user interface keeps: it polls parsed packets with `try_recv`
and hands commands to the worker with `send`.
"""
import queue
import select
import socket
import logging
import threading

from . import packets
from .error import BackendError, ConnectionClosed, ConnectionFailed


DEFAULT_PORT = 7326


class Config:
    """Connection settings.

    Attributes
    ----------
    nickname : `str`
    serverip : `str`
        Server hostname or address.
    port : `int`
    group : `str`
        Group to join on login.
    """

    def __init__(self, nickname, serverip, group, port=DEFAULT_PORT):
        self.nickname = nickname
        self.serverip = serverip
        self.port = port
        self.group = group

    def __repr__(self):
        return '<Config %s@%s:%s group=%s>' % (
            self.nickname, self.serverip, self.port, self.group)


class Client:
    """User interface end of the backend.

    Attributes
    ----------
    nickname : `str`
        Nickname as last requested by the user.
    msg_r : `queue.Queue`
        Parsed inbound packets.
    cmd_s : `queue.Queue`
        Outbound commands.
    """
    logger = logging.getLogger(__name__)

    def __init__(self, nickname, msg_r, cmd_s, server):
        self.nickname = nickname
        self.msg_r = msg_r
        self.cmd_s = cmd_s
        self.server = server

    def try_recv(self):
        """Return the next inbound packet, or `None` if nothing is waiting."""
        try:
            return self.msg_r.get_nowait()
        except queue.Empty:
            return None

    def send(self, command):
        """Queue a command for the network worker.

        Raises:
            BackendError: If the worker has stopped
        """
        if self.server.closed.is_set():
            raise BackendError('network worker has stopped')
        self.logger.debug('send: %r', command)
        self.cmd_s.put(command)


class Server:
    """Network worker: owns the socket and pumps both queues.

    Attributes
    ----------
    config : `Config`
    closed : `threading.Event`
        Set once the worker loop has ended for any reason.
    poll_interval : `float`
        Seconds to wait for socket readability before checking `cmd_s`.
    """
    logger = logging.getLogger(__name__)

    READ_SIZE = 4096

    def __init__(self, config, msg_s, cmd_r,
                 connect=socket.create_connection, poll_interval=0.05):
        self.config = config
        self.msg_s = msg_s
        self.cmd_r = cmd_r
        self.connect = connect
        self.poll_interval = poll_interval
        self.closed = threading.Event()
        self.sock = None
        self.reader = packets.PacketReader()

    def login_packet(self):
        return packets.encode(
            packets.T_LOGIN,
            self.config.nickname,
            self.config.nickname,
            self.config.group,
            'login',
            ''
        )

    def open(self):
        """Connect and log in.

        Raises:
            ConnectionFailed: If the server cannot be reached
        """
        addr = (self.config.serverip, self.config.port)
        self.logger.info('connecting to %s:%s', *addr)
        try:
            self.sock = self.connect(addr)
        except OSError as ex:
            raise ConnectionFailed('%s:%s: %s' % (addr[0], addr[1], ex)) from ex
        self.sock.sendall(self.login_packet())
        self.logger.info('login sent as %s to group %s',
                         self.config.nickname, self.config.group)

    def recv(self):
        """Read whatever is available and queue the decoded packets.

        Raises:
            ConnectionClosed: If the server closed the connection
        """
        data = self.sock.recv(self.READ_SIZE)
        if not data:
            raise ConnectionClosed('connection closed by server')
        for packet in self.reader.feed(data):
            self.logger.debug('recv: %r', packet)
            if packet[0] == packets.T_PING:
                self.sock.sendall(packets.encode(packets.T_PONG))
                continue
            if packet[0] == packets.T_PROTOCOL and len(packet) > 3:
                # Drop the protocol level, keep host and server id
                packet = [packet[0]] + packet[2:]
            self.msg_s.put(packet)

    def flush_commands(self):
        while True:
            try:
                command = self.cmd_r.get_nowait()
            except queue.Empty:
                return
            self.sock.sendall(command.to_packet())

    def run(self):
        """Worker loop. Returns when the connection ends."""
        try:
            self.open()
            while True:
                readable, _, _ = select.select([self.sock], [], [],
                                               self.poll_interval)
                if readable:
                    self.recv()
                self.flush_commands()
        except (OSError, ConnectionFailed, ConnectionClosed) as ex:
            self.logger.error('network worker stopped: %s', ex)
            self.msg_s.put([packets.T_ERROR, str(ex)])
        finally:
            self.closed.set()
            if self.sock is not None:
                self.sock.close()


def init(config):
    """Create the connected `Client`/`Server` pair for `config`.

    The server is not started; run `Server.run` in a worker thread.
    """
    msg_queue = queue.Queue()
    cmd_queue = queue.Queue()
    server = Server(config, msg_queue, cmd_queue)
    client = Client(config.nickname, msg_queue, cmd_queue, server)
    return client, server
