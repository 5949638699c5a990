from .client import Client, Server, Config, init, DEFAULT_PORT
from .command import Open, Personal, Beep, Name
from .error import IcbError, ConfigError, PacketError, BackendError
from . import packets

__version__ = '0.1.0'
