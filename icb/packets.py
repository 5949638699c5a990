#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""ICB packet framing.

Every packet is a single length byte followed by the packet type character,
the payload fields separated by ``\\x01`` and a terminating NUL. The length
byte counts everything after itself, so a packet is at most 256 bytes long.
"""
import logging

from .error import PacketError


logger = logging.getLogger(__name__)

T_LOGIN = 'a'
T_OPEN = 'b'
T_PERSONAL = 'c'
T_STATUS = 'd'
T_ERROR = 'e'
T_IMPORTANT = 'f'
T_EXIT = 'g'
T_COMMAND = 'h'
T_CMDOUT = 'i'
T_PROTOCOL = 'j'
T_BEEP = 'k'
T_PING = 'l'
T_PONG = 'm'

SEPARATOR = '\x01'
MAX_PACKET_LEN = 255
ENCODING = 'utf-8'


def encode(packet_type, *fields):
    """Build the wire form of a packet.

    Args:
        packet_type: Single packet type character (e.g. ``T_OPEN``)
        *fields: Payload fields

    Returns:
        bytes: Length-prefixed, NUL-terminated packet

    Raises:
        PacketError: If the type is not a single character or the packet
            does not fit in the 255 byte length limit
    """
    if len(packet_type) != 1:
        raise PacketError('invalid packet type %r' % (packet_type,))

    body = (packet_type + SEPARATOR.join(fields)).encode(ENCODING) + b'\x00'
    if len(body) > MAX_PACKET_LEN:
        raise PacketError('packet too long (%d bytes)' % len(body))

    return bytes([len(body)]) + body


def decode(body):
    """Split a packet body (without the length byte) into its fields.

    Returns:
        list: ``[type, field1, field2, ...]``, all as ``str``

    Raises:
        PacketError: If the body is empty
    """
    if not body:
        raise PacketError('empty packet')

    text = body.decode(ENCODING, errors='replace').rstrip('\x00')
    if not text:
        raise PacketError('empty packet')
    packet_type, payload = text[0], text[1:]
    if not payload:
        return [packet_type]
    return [packet_type] + payload.split(SEPARATOR)


class PacketReader:
    """Reassemble packets from an arbitrary chunked byte stream.

    Attributes
    ----------
    buffer : `bytearray`
        Bytes received but not yet forming a complete packet.
    """

    def __init__(self):
        self.buffer = bytearray()

    def feed(self, data):
        """Add received bytes and return every packet completed by them.

        Args:
            data (bytes): Bytes read from the socket

        Returns:
            list: Decoded packets, each a list of fields
        """
        self.buffer.extend(data)
        packets = []

        while self.buffer:
            length = self.buffer[0]
            if length == 0:
                # Zero length packets carry nothing we can use
                del self.buffer[0]
                continue
            if len(self.buffer) < length + 1:
                break

            body = bytes(self.buffer[1:length + 1])
            del self.buffer[:length + 1]
            try:
                packets.append(decode(body))
            except PacketError as ex:
                logger.warning('dropping packet: %s', ex)

        return packets
