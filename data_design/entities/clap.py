"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from datetime import datetime
import logging
import typing
import uuid
from data_design.validation import (current_time,
                                    to_epoch_milliseconds,
                                    validate_date_time,
                                    validate_uuid)
from .store import (execute_statement,
                    fetch_row,
                    fetch_rows,
                    rehydrate,
                    warn_if_no_rows)

LOGGER = logging.getLogger(__name__)

CLAP_COLUMNS = '"clapArticleId", "clapProfileId", "clapDate"'

SELECT_CLAP = f"SELECT {CLAP_COLUMNS} FROM clap"

CLAP_KEY_CONDITION = '"clapArticleId" = $1 AND "clapProfileId" = $2'


class Clap:
    """
    A profile's endorsement of an article. The (article id, profile id) pair
    identifies the clap and is fixed at construction; only the date can be
    changed afterwards.
    """
    __slots__ = ["_clap_article_id", "_clap_profile_id", "_clap_date"]

    def __init__(self, clap_article_id, clap_profile_id,
                 clap_date=None) -> None:
        self._clap_article_id: uuid.UUID = validate_uuid(clap_article_id)
        self._clap_profile_id: uuid.UUID = validate_uuid(clap_profile_id)
        self.clap_date = clap_date

    @property
    def clap_article_id(self) -> uuid.UUID:
        return self._clap_article_id

    @property
    def clap_profile_id(self) -> uuid.UUID:
        return self._clap_profile_id

    @property
    def clap_date(self) -> datetime:
        return self._clap_date

    @clap_date.setter
    def clap_date(self, value) -> None:
        if value is None:
            self._clap_date = current_time()
            return

        self._clap_date = validate_date_time(value)

    def __repr__(self) -> str:
        return (f"Clap(clap_article_id={self._clap_article_id!s}, "
                f"clap_profile_id={self._clap_profile_id!s})")

    def _key(self) -> str:
        return f"{self._clap_article_id}/{self._clap_profile_id}"

    async def insert(self, connection) -> None:
        """
        Insert this clap as a new row.

        Raises:
            asyncpg.PostgresError: If the store rejects the row, e.g. the
                profile already clapped the article.
        """
        await execute_statement(
            connection,
            f"INSERT INTO clap({CLAP_COLUMNS}) VALUES ($1, $2, $3)",
            self._clap_article_id, self._clap_profile_id, self._clap_date)
        LOGGER.debug("Inserted clap %s", self._key())

    async def update(self, connection) -> None:
        """ Rewrite the date of the row holding this clap's key. """
        status = await execute_statement(
            connection,
            f'UPDATE clap SET "clapDate" = $3 WHERE {CLAP_KEY_CONDITION}',
            self._clap_article_id, self._clap_profile_id, self._clap_date)
        warn_if_no_rows(status, "Clap update", self._key())

    async def delete(self, connection) -> None:
        """ Delete the row holding this clap's key. """
        status = await execute_statement(
            connection,
            f"DELETE FROM clap WHERE {CLAP_KEY_CONDITION}",
            self._clap_article_id, self._clap_profile_id)
        warn_if_no_rows(status, "Clap delete", self._key())

    @staticmethod
    def from_row(row) -> "Clap":
        """ Build a Clap from a row keyed by column name. """
        return Clap(row["clapArticleId"], row["clapProfileId"],
                    row["clapDate"])

    @staticmethod
    async def get_clap_by_clap_article_id_and_clap_profile_id(
            connection,
            clap_article_id,
            clap_profile_id) -> typing.Optional["Clap"]:
        """
        Get the clap a profile gave an article.

        Returns:
            Clap | None: The clap, or None if the profile has not clapped
                the article.

        Raises:
            InvalidArgumentError, OutOfRangeError: If either id is malformed.
        """
        clap_article_id = validate_uuid(clap_article_id)
        clap_profile_id = validate_uuid(clap_profile_id)
        row = await fetch_row(connection,
                              f"{SELECT_CLAP} WHERE {CLAP_KEY_CONDITION}",
                              clap_article_id, clap_profile_id)
        return None if row is None else rehydrate(Clap.from_row, row)

    @staticmethod
    async def get_claps_by_clap_article_id(connection,
                                           clap_article_id) -> list["Clap"]:
        """ Get every clap an article received, possibly none. """
        clap_article_id = validate_uuid(clap_article_id)
        rows = await fetch_rows(connection,
                                f'{SELECT_CLAP} WHERE "clapArticleId" = $1',
                                clap_article_id)
        return [rehydrate(Clap.from_row, row) for row in rows]

    @staticmethod
    async def get_claps_by_clap_profile_id(connection,
                                           clap_profile_id) -> list["Clap"]:
        """ Get every clap a profile gave, possibly none. """
        clap_profile_id = validate_uuid(clap_profile_id)
        rows = await fetch_rows(connection,
                                f'{SELECT_CLAP} WHERE "clapProfileId" = $1',
                                clap_profile_id)
        return [rehydrate(Clap.from_row, row) for row in rows]

    def serialize(self) -> dict:
        """ Flat mapping for external transmission. """
        return {
            "clapArticleId": str(self._clap_article_id),
            "clapProfileId": str(self._clap_profile_id),
            "clapDate": to_epoch_milliseconds(self._clap_date),
        }
