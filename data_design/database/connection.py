"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from dataclasses import dataclass
import logging
import typing
import asyncpg
from data_design.configuration import Configuration
from data_design.configuration_layout import load_configuration
from data_design.logging_consts import create_logger

ROOT_LOGGER_NAME = "data_design"


@dataclass(frozen=True)
class DatabaseSettings:
    """
    Connection parameters for the store.

    Attributes:
        host (str): Database host address.
        port (int): Database port number.
        name (str): Database name.
        user (str): Database username.
        password (str): Database password.
    """
    host: str
    port: int
    name: str
    user: str
    password: str

    @classmethod
    def from_configuration(cls, config: Configuration) -> "DatabaseSettings":
        """ Build settings from the processed [database] section. """
        return cls(host=config.get_entry("database", "host"),
                   port=config.get_entry("database", "port"),
                   name=config.get_entry("database", "name"),
                   user=config.get_entry("database", "user"),
                   password=config.get_entry("database", "password"))


async def open_connection(settings: DatabaseSettings,
                          logger: logging.Logger,
                          timeout: float = 5.0) -> asyncpg.Connection:
    """
    Open a single asyncpg connection.

    The entity layer never opens or closes connections itself; callers use
    this to obtain one, pass it to insert/update/delete and the finders, and
    close it when done.

    Args:
        settings (DatabaseSettings): Where and as whom to connect.
        logger (logging.Logger): Logger for connection outcome.
        timeout (float): Connection timeout in seconds.

    Returns:
        asyncpg.Connection: The open connection.

    Raises:
        asyncpg.PostgresError, OSError, asyncio.TimeoutError: Propagated
            unchanged when the connection cannot be made.
    """
    logger = logger.getChild(__name__)

    try:
        connection = await asyncpg.connect(user=settings.user,
                                           password=settings.password,
                                           database=settings.name,
                                           host=settings.host,
                                           port=settings.port,
                                           timeout=timeout)

    except asyncpg.InvalidPasswordError:
        logger.critical("Database authentication failed (check user/"
                        "password).")
        raise

    except asyncpg.InvalidCatalogNameError:
        logger.critical("Database '%s' does not exist.", settings.name)
        raise

    logger.info("Connected to database %s on %s:%d",
                settings.name, settings.host, settings.port)
    return connection


async def connect_from_configuration(
        config: typing.Optional[Configuration] = None
        ) -> asyncpg.Connection:
    """
    Set up logging and open a connection from the configuration.

    The [logging] log_level is applied to the package logger, which every
    module logger in data_design inherits from, before connecting with the
    [database] settings.

    Args:
        config (Configuration | None): Processed configuration; read with
            load_configuration() when not given.

    Returns:
        asyncpg.Connection: The open connection, owned by the caller.

    Raises:
        ValueError: If the configuration is invalid.
    """
    if config is None:
        config = load_configuration()

    logger = create_logger(ROOT_LOGGER_NAME,
                           config.get_entry("logging", "log_level"))
    return await open_connection(DatabaseSettings.from_configuration(config),
                                 logger)
