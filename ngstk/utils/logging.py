"""
Logging configuration for ngstk.

Library modules log through the root logger; applications embedding
ngstk call `setup_logging` once to decide what is shown.
"""

import sys
import logging

DETAILED_FORMAT = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
PLAIN_FORMAT = '%(message)s'


def setup_logging(debug=False, log_file=None, verbose=False, stream=None):
    """
    Configure the root logger.

    Args:
        debug: Log DEBUG messages with file and line information
        log_file: Also write detailed log records to this file
        verbose: Prefix INFO messages with time and level
        stream: Console stream, defaults to stdout

    Returns:
        The configured root logger
    """
    if debug:
        log_level = logging.DEBUG
        log_format = DETAILED_FORMAT
    elif verbose:
        log_level = logging.INFO
        log_format = VERBOSE_FORMAT
    else:
        log_level = logging.INFO
        log_format = PLAIN_FORMAT

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Replace handlers from earlier calls
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        logger.addHandler(file_handler)

    logging.debug(f"Logging configured (level={logging.getLevelName(log_level)}, file={log_file})")
    return logger
