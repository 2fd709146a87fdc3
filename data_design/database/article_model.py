"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from .base import Base


class ArticleModel(Base):
    """
    SQLAlchemy model describing the article table.

    Attributes:
        article_id (UUID): Primary key (`articleId`).
        article_author_profile_id (UUID): Foreign key to `profile.profileId`.
            Indexed, as articles are looked up by author.
        article_content (str): Article text, up to 140 characters.
        article_date (datetime): When the article was published.
    """
    # pylint: disable=too-few-public-methods
    __tablename__ = "article"

    article_id = Column("articleId", UUID(as_uuid=True), primary_key=True)
    article_author_profile_id = Column("articleAuthorProfileId",
                                       UUID(as_uuid=True),
                                       ForeignKey("profile.profileId"),
                                       nullable=False, index=True)
    article_content = Column("articleContent", String(140), nullable=False)
    article_date = Column("articleDate", DateTime(timezone=True),
                          nullable=False)
