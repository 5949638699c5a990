#!/usr/bin/env python3
# -*- coding: utf-8 -*-
class IcbError(Exception):
    ''' Base class for all exceptions in the icb package '''

class ConfigError(IcbError):
    ''' Exception raised when the client configuration is incomplete '''

class PacketError(IcbError):
    ''' Exception raised when a packet cannot be encoded or decoded '''

class BackendError(IcbError):
    ''' Exception raised when the network worker can no longer take commands '''

class SocketError(Exception):
    ''' Base class for all exceptions raised by the network worker '''

class ConnectionFailed(SocketError):
    ''' Exception raised when the connection to the server fails '''

class ConnectionClosed(SocketError):
    ''' Exception raised when the connection to the server is closed '''
