"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import logging
import typing
import asyncpg
from data_design.exceptions import DataDesignError, RowConversionError

T = typing.TypeVar("T")

LOGGER = logging.getLogger(__name__)


async def execute_statement(connection, query: str, *args) -> str:
    """
    Run a statement that returns no rows.

    Returns:
        str: The command status tag, e.g. 'UPDATE 1'.

    Raises:
        asyncpg.PostgresError: Logged, then propagated unchanged.
    """
    LOGGER.debug("Executing: %s", query)

    try:
        return await connection.execute(query, *args)

    except asyncpg.PostgresError as ex:
        LOGGER.exception("Database error executing statement: %s", ex)
        raise


async def fetch_row(connection, query: str, *args):
    """
    Run a query expected to match at most one row.

    Returns:
        The row, or None when nothing matched.

    Raises:
        asyncpg.PostgresError: Logged, then propagated unchanged.
    """
    LOGGER.debug("Fetching row: %s", query)

    try:
        return await connection.fetchrow(query, *args)

    except asyncpg.PostgresError as ex:
        LOGGER.exception("Database error fetching row: %s", ex)
        raise


async def fetch_rows(connection, query: str, *args) -> list:
    """
    Run a query and return all matching rows in result-set order.

    Raises:
        asyncpg.PostgresError: Logged, then propagated unchanged.
    """
    LOGGER.debug("Fetching rows: %s", query)

    try:
        return list(await connection.fetch(query, *args))

    except asyncpg.PostgresError as ex:
        LOGGER.exception("Database error fetching rows: %s", ex)
        raise


def rehydrate(from_row: typing.Callable[[typing.Any], T], row) -> T:
    """
    Build an entity from a stored row with the entity's from_row.

    Raises:
        RowConversionError: If the row no longer satisfies the entity's
            field constraints.
    """
    try:
        return from_row(row)

    except DataDesignError as ex:
        raise RowConversionError(
            f"Stored row could not be converted: {ex}") from ex


def rows_affected(status: str) -> typing.Optional[int]:
    """
    Row count from a command status tag such as 'UPDATE 3' or 'DELETE 0'.

    Returns None if the tag carries no count.
    """
    if not isinstance(status, str):
        return None

    _, _, count = status.rpartition(" ")
    return int(count) if count.isdigit() else None


def warn_if_no_rows(status: str, operation: str, key: str) -> None:
    """
    Log when an update or delete matched nothing. The caller is not told;
    a missing row is not an error for these operations.
    """
    if rows_affected(status) == 0:
        LOGGER.warning("%s matched no rows for %s", operation, key)
