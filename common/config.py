#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import json
import errno
import logging
import argparse

from icb import DEFAULT_PORT
from icb.error import ConfigError


DEFAULTS = {
    'port': DEFAULT_PORT,
    'log_level': 'info',
    'log_file': 'icb_tui.log',
    'tick_rate': 0.25,
}

REQUIRED = ('nickname', 'hostname', 'group')


class RobustFileHandler(logging.FileHandler):
    """FileHandler that survives flush errors on the log file"""

    def flush(self):
        """Flush the stream, ignoring EINVAL from a stale file handle"""
        try:
            super().flush()
        except OSError as e:
            # Windows reports "Invalid argument" for handles in a bad state
            if e.errno != errno.EINVAL:
                raise


def configure_logger(logger,
                     log_file=None,
                     log_format=None,
                     log_level=logging.INFO):
    """Configure a logger with a file or stream handler

    Args:
        logger: Logger instance or logger name string
        log_file: File path string or file-like object (None for stderr)
        log_format: Format string for log messages
        log_level: Logging level (e.g., logging.INFO, logging.DEBUG)

    Returns:
        Configured logger instance
    """
    # The screen belongs to the UI, so a path is the normal case here
    if isinstance(log_file, str):
        handler = RobustFileHandler(
            log_file,
            mode='a',
            encoding='utf-8',
            errors='replace'
        )
    else:
        handler = logging.StreamHandler(log_file)

    if isinstance(logger, str):
        logger = logging.getLogger(logger)

    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)
    logger.setLevel(log_level)

    return logger


def build_parser():
    parser = argparse.ArgumentParser(
        prog='icb-tui',
        description='Terminal chat client for ICB'
    )
    parser.add_argument('config', nargs='?',
                        help='JSON config file; flags override its values')
    parser.add_argument('-n', '--nickname', help='nickname to log in with')
    parser.add_argument('-s', '--hostname', help='ICB server to connect to')
    parser.add_argument('-p', '--port', type=int,
                        help='server port (default %d)' % DEFAULT_PORT)
    parser.add_argument('-g', '--group', help='group to join')
    parser.add_argument('--log-level', dest='log_level',
                        help='debug, info, warning or error')
    parser.add_argument('--log-file', dest='log_file',
                        help='file to write the log to')
    return parser


def load_config_file(path):
    """Load a JSON config file

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(path, 'r') as fp:
            conf = json.load(fp)
    except (OSError, ValueError) as ex:
        raise ConfigError('cannot load %s: %s' % (path, ex)) from ex
    if not isinstance(conf, dict):
        raise ConfigError('%s: expected a JSON object' % path)
    return conf


def get_config(argv=None):
    """Load configuration from the command line and optional config file

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Tuple of (conf, kwargs) where:
            conf: Full configuration dictionary, defaults filled in
            kwargs: icb.Config parameters extracted from conf

    Raises:
        ConfigError: If a required value is missing or invalid
    """
    args = build_parser().parse_args(argv)

    conf = dict(DEFAULTS)
    if args.config:
        conf.update(load_config_file(args.config))

    # Command line flags win over the file
    for key, value in vars(args).items():
        if key != 'config' and value is not None:
            conf[key] = value

    missing = [key for key in REQUIRED if not conf.get(key)]
    if missing:
        raise ConfigError('missing required setting(s): %s' % ', '.join(missing))

    try:
        port = int(conf['port'])
    except (TypeError, ValueError) as ex:
        raise ConfigError('invalid port %r' % (conf['port'],)) from ex
    if not 0 < port < 65536:
        raise ConfigError('invalid port %r' % (conf['port'],))

    if not isinstance(getattr(logging, str(conf['log_level']).upper(), None), int):
        raise ConfigError('invalid log level %r' % (conf['log_level'],))

    return conf, {
        'nickname': conf['nickname'],
        'serverip': conf['hostname'],
        'port': port,
        'group': conf['group'],
    }
