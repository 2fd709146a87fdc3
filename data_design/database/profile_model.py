"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from sqlalchemy import CHAR, Column, String
from sqlalchemy.dialects.postgresql import UUID
from .base import Base


class ProfileModel(Base):
    """
    SQLAlchemy model describing the profile table.

    Attributes:
        profile_id (UUID): Primary key (`profileId`).
        profile_activation_token (str): 32 hex character token, null once
            the account has been activated.
        profile_full_name (str): Display name, up to 32 characters.
        profile_caption (str): Short caption, up to 140 characters.
        profile_email (str): Unique email address, up to 128 characters.
        profile_hash (str): 128 hex character password hash.
        profile_phone (str): Optional phone number, up to 32 characters.
        profile_salt (str): 64 hex character password salt.
    """
    # pylint: disable=too-few-public-methods
    __tablename__ = "profile"

    profile_id = Column("profileId", UUID(as_uuid=True), primary_key=True)
    profile_activation_token = Column("profileActivationToken", CHAR(32))
    profile_full_name = Column("profileFullName", String(32), nullable=False)
    profile_caption = Column("profileCaption", String(140), nullable=False)
    profile_email = Column("profileEmail", String(128),
                           unique=True, nullable=False)
    profile_hash = Column("profileHash", CHAR(128), nullable=False)
    profile_phone = Column("profilePhone", String(32))
    profile_salt = Column("profileSalt", CHAR(64), nullable=False)
