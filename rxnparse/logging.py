"""
Logging for reaction network compilation.

All loggers of the package live below the ``rxnparse`` logger, which is set
up on first use by :func:`get_logger`. The level defaults to WARNING and can
be overridden with the ``RXNPARSE_LOG`` environment variable, holding either
an integer or a level name::

    RXNPARSE_LOG=DEBUG python -m rxnparse.export network.py urdme

At ``DEBUG`` the compiler reports the size of each compiled network; the
per-reaction rewriting of propensities is logged at :data:`EXTENDED_DEBUG`.
"""

import logging
import os
import time
import warnings

import rxnparse

LOG_LEVEL_ENV_VAR = 'RXNPARSE_LOG'
BASE_LOGGER_NAME = 'rxnparse'
#: Level below DEBUG used for per-reaction output.
EXTENDED_DEBUG = 5
NAMED_LOG_LEVELS = {'NOTSET': logging.NOTSET,
                    'EXTENDED_DEBUG': EXTENDED_DEBUG,
                    'DEBUG': logging.DEBUG,
                    'INFO': logging.INFO,
                    'WARNING': logging.WARNING,
                    'ERROR': logging.ERROR,
                    'CRITICAL': logging.CRITICAL}

logging.addLevelName(EXTENDED_DEBUG, 'EXTENDED_DEBUG')


def formatter(time_utc=False):
    """
    Build a logging formatter using local or UTC time

    Parameters
    ----------
    time_utc : bool, optional (default: False)
        Use UTC instead of local time stamps in log messages

    Returns
    -------
    A logging.Formatter object for rxnparse logging
    """
    log_fmt = logging.Formatter('%(asctime)s.%(msecs).3d - %(name)s - '
                                '%(levelname)s - %(message)s',
                                datefmt='%Y-%m-%d %H:%M:%S')
    if time_utc:
        log_fmt.converter = time.gmtime
    return log_fmt


def level_from_environment(default=logging.WARNING):
    """The log level set in ``RXNPARSE_LOG``, or ``default`` if unset."""
    value = os.environ.get(LOG_LEVEL_ENV_VAR)
    if value is None:
        return default
    if value in NAMED_LOG_LEVELS:
        return NAMED_LOG_LEVELS[value]
    try:
        return int(value)
    except ValueError:
        raise ValueError('Environment variable {} contains an invalid value '
                         '"{}". If set, its value must be one of {} '
                         '(case-sensitive) or an integer log level.'.format(
                             LOG_LEVEL_ENV_VAR, value,
                             ", ".join(NAMED_LOG_LEVELS)))


def setup_logger(level=logging.WARNING, console_output=True, file_output=False,
                 time_utc=False, capture_warnings=True):
    """
    Set up the rxnparse base logger, replacing any existing handlers.

    Parameters
    ----------
    level : int
        Logging level. Overridden by ``RXNPARSE_LOG`` when it is set.
    console_output : bool
        Log to standard error if True (default)
    file_output : string
        Also write the log to this file, or False to disable (default)
    time_utc : bool
        Time stamps in UTC (True) or local time (False, default)
    capture_warnings : bool
        Route warnings, e.g. refused overwrites of hand-written files, to
        the log if True (default)

    Returns
    -------
    The base logging.Logger. Modules should log through :func:`get_logger`.
    """
    log = logging.getLogger(BASE_LOGGER_NAME)
    log.setLevel(level_from_environment(level))
    log.handlers = []

    log_fmt = formatter(time_utc=time_utc)
    handlers = []
    if console_output:
        handlers.append(logging.StreamHandler())
    if file_output:
        handlers.append(logging.FileHandler(file_output))
    for handler in handlers:
        handler.setFormatter(log_fmt)
        log.addHandler(handler)

    log.info('Logging started on rxnparse version %s', rxnparse.__version__)
    logging.captureWarnings(capture_warnings)
    return log


def get_logger(logger_name=BASE_LOGGER_NAME, network=None, log_level=None,
               **kwargs):
    """
    Returns (if extant) or creates an rxnparse logger

    Parameters
    ----------
    logger_name : string
        Logger namespace, typically ``__name__``
    network : rxnparse.core.ReactionNetwork
        Network being compiled. If given, a :class:`NetworkLoggerAdapter`
        is returned which prefixes entries with the network's name.
    log_level : bool or int
        Override the level of the requested logger. True means
        logging.DEBUG.
    **kwargs : kwargs
        Passed to :func:`setup_logger` if the base logger has not been set
        up yet, ignored with a warning otherwise.

    Examples
    --------

    >>> from rxnparse.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug('Test message')
    """
    if BASE_LOGGER_NAME not in logging.Logger.manager.loggerDict:
        setup_logger(**kwargs)
    elif kwargs:
        warnings.warn('rxnparse logger already exists, ignoring keyword '
                      'arguments to setup_logger')

    logger = logging.getLogger(logger_name)

    if log_level is not None and log_level is not False:
        if isinstance(log_level, bool):
            log_level = logging.DEBUG
        elif not isinstance(log_level, int):
            raise ValueError('log_level must be a boolean, integer or None')
        logger.setLevel(log_level)

    if network is None:
        return logger
    return NetworkLoggerAdapter(logger, {'network': network})


class NetworkLoggerAdapter(logging.LoggerAdapter):
    """
    Prefix log entries with the name of the network being compiled.

    Logging calls accept an extra ``reaction`` keyword holding the 1-based
    position of the reaction an entry refers to:

    >>> from rxnparse.examples.birth_death import network
    >>> log = get_logger(__name__, network=network)
    >>> log.warning('Propensity reads no species', reaction=1)

    logs ``[birth_death] reaction #1: Propensity reads no species``.
    """
    def process(self, msg, kwargs):
        reaction = kwargs.pop('reaction', None)
        network = self.extra.get('network')
        prefix = []
        if network is not None:
            prefix.append('[%s]' % network.name)
        if reaction is not None:
            prefix.append('reaction #%d:' % reaction)
        return ' '.join(prefix + [str(msg)]), kwargs
