"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import logging
import sys

LOGGING_DATETIME_FORMAT_STRING = "%Y-%m-%d %H:%M:%S"
LOGGING_DEFAULT_LOG_LEVEL = logging.DEBUG
LOGGING_LOG_FORMAT_STRING = "%(asctime)s [%(levelname)s] %(message)s"


def create_logger(name: str,
                  level=LOGGING_DEFAULT_LOG_LEVEL) -> logging.Logger:
    """
    Create a logger that writes formatted records to stdout.

    A stream handler is only attached once, so calling this again for the
    same name just updates the level.

    parameters:
        name (str) : Logger name.
        level (int | str) : Log level, either numeric or a level name.

    returns:
        The configured logger instance.
    """
    logger = logging.getLogger(name)

    if not any(isinstance(handler, logging.StreamHandler)
               for handler in logger.handlers):
        log_format = logging.Formatter(LOGGING_LOG_FORMAT_STRING,
                                       LOGGING_DATETIME_FORMAT_STRING)
        console_stream = logging.StreamHandler(sys.stdout)
        console_stream.setFormatter(log_format)
        logger.addHandler(console_stream)

    logger.setLevel(level)
    logger.propagate = True
    return logger
