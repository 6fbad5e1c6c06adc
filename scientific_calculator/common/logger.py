"""Package-wide logger."""
import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVEL_ENV = "SCIENTIFIC_CALCULATOR_LOG_LEVEL"


def get_logger(name: str = "scientific_calculator") -> logging.Logger:
    """
    Return the named logger, attaching a stream handler on first use.

    The level is read from the ``SCIENTIFIC_CALCULATOR_LOG_LEVEL`` environment variable
    and defaults to WARNING so the CLI output stays clean.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        log.addHandler(handler)
        log.setLevel(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return log


logger: logging.Logger = get_logger()
