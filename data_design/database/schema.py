"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import logging
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateIndex, CreateTable, DropTable
from .base import Base

LOGGER = logging.getLogger(__name__)


def schema_statements() -> list[str]:
    """
    PostgreSQL DDL creating every table and index, parents before children.

    Returns:
        list[str]: CREATE TABLE / CREATE INDEX statements, each guarded with
            IF NOT EXISTS.
    """
    dialect = postgresql.dialect()
    statements = []

    for table in Base.metadata.sorted_tables:
        statements.append(
            str(CreateTable(table, if_not_exists=True).compile(
                dialect=dialect)).strip())

        for index in sorted(table.indexes, key=lambda idx: idx.name):
            statements.append(
                str(CreateIndex(index, if_not_exists=True).compile(
                    dialect=dialect)).strip())

    return statements


async def create_schema(connection) -> None:
    """
    Create the profile, article and clap tables on an open connection.

    Args:
        connection: Open asyncpg connection, owned by the caller.
    """
    for statement in schema_statements():
        LOGGER.debug("Executing DDL: %s", statement)
        await connection.execute(statement)

    LOGGER.info("Schema created (%d tables)",
                len(Base.metadata.sorted_tables))


async def drop_schema(connection) -> None:
    """
    Drop the tables, children before parents.

    Args:
        connection: Open asyncpg connection, owned by the caller.
    """
    dialect = postgresql.dialect()

    for table in reversed(Base.metadata.sorted_tables):
        statement = str(DropTable(table, if_exists=True).compile(
            dialect=dialect)).strip()
        LOGGER.debug("Executing DDL: %s", statement)
        await connection.execute(statement)

    LOGGER.info("Schema dropped")
