"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from sqlalchemy import Column, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from .base import Base


class ClapModel(Base):
    """
    SQLAlchemy model describing the clap table, the join between a profile
    and an article it endorsed.

    The primary key is the (`clapArticleId`, `clapProfileId`) pair, so a
    profile can clap an article at most once. Its leading column serves
    lookups by article; `clapProfileId` carries its own index.
    """
    # pylint: disable=too-few-public-methods
    __tablename__ = "clap"

    clap_article_id = Column("clapArticleId", UUID(as_uuid=True),
                             ForeignKey("article.articleId"),
                             primary_key=True)
    clap_profile_id = Column("clapProfileId", UUID(as_uuid=True),
                             ForeignKey("profile.profileId"),
                             primary_key=True, index=True)
    clap_date = Column("clapDate", DateTime(timezone=True), nullable=False)
