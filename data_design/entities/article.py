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
from data_design.exceptions import InvalidArgumentError
from data_design.validation import (current_time,
                                    escape_like,
                                    sanitize_string,
                                    to_epoch_milliseconds,
                                    validate_date_time,
                                    validate_text,
                                    validate_uuid)
from .store import (execute_statement,
                    fetch_row,
                    fetch_rows,
                    rehydrate,
                    warn_if_no_rows)

LOGGER = logging.getLogger(__name__)

ARTICLE_CONTENT_MAX_LENGTH = 140

ARTICLE_COLUMNS = ('"articleId", "articleAuthorProfileId", '
                   '"articleContent", "articleDate"')

SELECT_ARTICLE = f"SELECT {ARTICLE_COLUMNS} FROM article"


class Article:
    """
    A short piece of content published by a profile.

    Attributes:
        article_id (uuid.UUID): Primary key, fixed at construction.
        article_author_profile_id (uuid.UUID): Profile that wrote it.
        article_content (str): Text of the article, up to 140 characters.
        article_date (datetime): When it was published; the current time
            when not given.
    """
    __slots__ = ["_article_id", "_article_author_profile_id",
                 "_article_content", "_article_date"]

    def __init__(self,
                 article_id,
                 article_author_profile_id,
                 article_content: str,
                 article_date=None) -> None:
        self._article_id: uuid.UUID = validate_uuid(article_id)
        self.article_author_profile_id = article_author_profile_id
        self.article_content = article_content
        self.article_date = article_date

    @property
    def article_id(self) -> uuid.UUID:
        return self._article_id

    @property
    def article_author_profile_id(self) -> uuid.UUID:
        return self._article_author_profile_id

    @article_author_profile_id.setter
    def article_author_profile_id(self, value) -> None:
        self._article_author_profile_id = validate_uuid(value)

    @property
    def article_content(self) -> str:
        return self._article_content

    @article_content.setter
    def article_content(self, value: str) -> None:
        self._article_content = validate_text(value, "article content",
                                              ARTICLE_CONTENT_MAX_LENGTH)

    @property
    def article_date(self) -> datetime:
        return self._article_date

    @article_date.setter
    def article_date(self, value) -> None:
        # None means "now"
        if value is None:
            self._article_date = current_time()
            return

        self._article_date = validate_date_time(value)

    def __repr__(self) -> str:
        return (f"Article(article_id={self._article_id!s}, "
                f"article_author_profile_id="
                f"{self._article_author_profile_id!s})")

    async def insert(self, connection) -> None:
        """
        Insert this article as a new row.

        Raises:
            asyncpg.PostgresError: If the store rejects the row, e.g. a
                duplicate id or an unknown author.
        """
        await execute_statement(
            connection,
            f"INSERT INTO article({ARTICLE_COLUMNS}) VALUES ($1, $2, $3, $4)",
            *self._column_values())
        LOGGER.debug("Inserted article %s", self._article_id)

    async def update(self, connection) -> None:
        """ Rewrite the row holding this article's id. """
        status = await execute_statement(
            connection,
            'UPDATE article SET "articleAuthorProfileId" = $2, '
            '"articleContent" = $3, "articleDate" = $4 '
            'WHERE "articleId" = $1',
            *self._column_values())
        warn_if_no_rows(status, "Article update", str(self._article_id))

    async def delete(self, connection) -> None:
        """ Delete the row holding this article's id. """
        status = await execute_statement(
            connection,
            'DELETE FROM article WHERE "articleId" = $1',
            self._article_id)
        warn_if_no_rows(status, "Article delete", str(self._article_id))

    def _column_values(self) -> tuple:
        return (self._article_id, self._article_author_profile_id,
                self._article_content, self._article_date)

    @staticmethod
    def from_row(row) -> "Article":
        """ Build an Article from a row keyed by column name. """
        return Article(row["articleId"], row["articleAuthorProfileId"],
                       row["articleContent"], row["articleDate"])

    @staticmethod
    async def get_article_by_article_id(connection,
                                        article_id
                                        ) -> typing.Optional["Article"]:
        """
        Get the article with the given id.

        Args:
            connection: Open asyncpg connection.
            article_id (uuid.UUID | str | bytes): Id to search for.

        Returns:
            Article | None: The article, or None if not found.

        Raises:
            InvalidArgumentError, OutOfRangeError: If the id is malformed.
        """
        article_id = validate_uuid(article_id)
        row = await fetch_row(connection,
                              f'{SELECT_ARTICLE} WHERE "articleId" = $1',
                              article_id)
        return None if row is None else rehydrate(Article.from_row, row)

    @staticmethod
    async def get_articles_by_article_author_profile_id(
            connection,
            article_author_profile_id) -> list["Article"]:
        """
        Get every article written by a profile, possibly none.

        Raises:
            InvalidArgumentError, OutOfRangeError: If the id is malformed.
        """
        article_author_profile_id = validate_uuid(article_author_profile_id)
        rows = await fetch_rows(
            connection,
            f'{SELECT_ARTICLE} WHERE "articleAuthorProfileId" = $1',
            article_author_profile_id)
        return [rehydrate(Article.from_row, row) for row in rows]

    @staticmethod
    async def get_articles_by_article_content(connection,
                                              article_content: str
                                              ) -> list["Article"]:
        """
        Get the articles whose content contains the given text. Matching
        is case-sensitive and wildcards in the text match literally.

        Raises:
            InvalidArgumentError: If the text is empty once sanitized.
        """
        article_content = sanitize_string(article_content, "article content")
        if not article_content:
            raise InvalidArgumentError("article content search is empty or "
                                       "insecure")

        rows = await fetch_rows(
            connection,
            f'{SELECT_ARTICLE} WHERE "articleContent" LIKE $1',
            f"%{escape_like(article_content)}%")
        return [rehydrate(Article.from_row, row) for row in rows]

    @staticmethod
    async def get_all_articles(connection) -> list["Article"]:
        """ Get every stored article. """
        rows = await fetch_rows(connection, SELECT_ARTICLE)
        return [rehydrate(Article.from_row, row) for row in rows]

    def serialize(self) -> dict:
        """ Flat mapping for external transmission. """
        return {
            "articleId": str(self._article_id),
            "articleAuthorProfileId": str(self._article_author_profile_id),
            "articleContent": self._article_content,
            "articleDate": to_epoch_milliseconds(self._article_date),
        }
