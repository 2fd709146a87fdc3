"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import logging
import typing
import uuid
from data_design.credentials import (ACTIVATION_TOKEN_LENGTH,
                                     PASSWORD_HASH_LENGTH,
                                     PASSWORD_SALT_LENGTH)
from data_design.exceptions import InvalidArgumentError, OutOfRangeError
from data_design.validation import (escape_like,
                                    sanitize_string,
                                    validate_email,
                                    validate_hex,
                                    validate_optional_text,
                                    validate_text,
                                    validate_uuid)
from .store import (execute_statement,
                    fetch_row,
                    fetch_rows,
                    rehydrate,
                    warn_if_no_rows)

LOGGER = logging.getLogger(__name__)

PROFILE_FULL_NAME_MAX_LENGTH = 32
PROFILE_CAPTION_MAX_LENGTH = 140
PROFILE_EMAIL_MAX_LENGTH = 128
PROFILE_PHONE_MAX_LENGTH = 32

PROFILE_COLUMNS = ('"profileId", "profileActivationToken", '
                   '"profileFullName", "profileCaption", "profileEmail", '
                   '"profileHash", "profilePhone", "profileSalt"')

SELECT_PROFILE = f"SELECT {PROFILE_COLUMNS} FROM profile"


class Profile:
    """
    An account on the platform: who the user is, how to reach them and the
    credentials they sign in with.

    Every field is assigned through its property setter, so a Profile built
    from caller input and one rehydrated from a row pass the same checks.
    The profile id is fixed at construction.
    """
    __slots__ = ["_profile_id", "_profile_activation_token",
                 "_profile_full_name", "_profile_caption", "_profile_email",
                 "_profile_hash", "_profile_phone", "_profile_salt"]

    def __init__(self,
                 profile_id,
                 profile_activation_token: typing.Optional[str],
                 profile_full_name: str,
                 profile_caption: str,
                 profile_email: str,
                 profile_hash: str,
                 profile_phone: typing.Optional[str],
                 profile_salt: str) -> None:
        """
        Constructor for a Profile.

        Args:
            profile_id (uuid.UUID | str | bytes): Identifier of the profile.
            profile_activation_token (str | None): 32 hex character token, or
                None for an activated account.
            profile_full_name (str): Full name, up to 32 characters.
            profile_caption (str): Caption, up to 140 characters.
            profile_email (str): Email address, up to 128 characters.
            profile_hash (str): 128 hex character password hash.
            profile_phone (str | None): Phone number, up to 32 characters.
            profile_salt (str): 64 hex character password salt.

        Raises:
            InvalidArgumentError: If any value is malformed or insecure.
            OutOfRangeError: If any value is outside its field's bounds.
        """
        self._profile_id: uuid.UUID = validate_uuid(profile_id)
        self.profile_activation_token = profile_activation_token
        self.profile_full_name = profile_full_name
        self.profile_caption = profile_caption
        self.profile_email = profile_email
        self.profile_hash = profile_hash
        self.profile_phone = profile_phone
        self.profile_salt = profile_salt

    @property
    def profile_id(self) -> uuid.UUID:
        """ Primary key of the profile. """
        return self._profile_id

    @property
    def profile_activation_token(self) -> typing.Optional[str]:
        """ Activation token, None once the account is activated. """
        return self._profile_activation_token

    @profile_activation_token.setter
    def profile_activation_token(self, value: typing.Optional[str]) -> None:
        if value is None:
            self._profile_activation_token = None
            return

        self._profile_activation_token = validate_hex(
            value, "profile activation token", ACTIVATION_TOKEN_LENGTH,
            non_hex_error=OutOfRangeError)

    @property
    def profile_full_name(self) -> str:
        return self._profile_full_name

    @profile_full_name.setter
    def profile_full_name(self, value: str) -> None:
        self._profile_full_name = validate_text(
            value, "profile full name", PROFILE_FULL_NAME_MAX_LENGTH)

    @property
    def profile_caption(self) -> str:
        return self._profile_caption

    @profile_caption.setter
    def profile_caption(self, value: str) -> None:
        self._profile_caption = validate_text(
            value, "profile caption", PROFILE_CAPTION_MAX_LENGTH)

    @property
    def profile_email(self) -> str:
        return self._profile_email

    @profile_email.setter
    def profile_email(self, value: str) -> None:
        self._profile_email = validate_email(value, PROFILE_EMAIL_MAX_LENGTH)

    @property
    def profile_hash(self) -> str:
        return self._profile_hash

    @profile_hash.setter
    def profile_hash(self, value: str) -> None:
        self._profile_hash = validate_hex(value, "profile password hash",
                                          PASSWORD_HASH_LENGTH)

    @property
    def profile_phone(self) -> typing.Optional[str]:
        return self._profile_phone

    @profile_phone.setter
    def profile_phone(self, value: typing.Optional[str]) -> None:
        self._profile_phone = validate_optional_text(
            value, "profile phone", PROFILE_PHONE_MAX_LENGTH)

    @property
    def profile_salt(self) -> str:
        return self._profile_salt

    @profile_salt.setter
    def profile_salt(self, value: str) -> None:
        self._profile_salt = validate_hex(value, "profile salt",
                                          PASSWORD_SALT_LENGTH)

    def __repr__(self) -> str:
        return (f"Profile(profile_id={self._profile_id!s}, "
                f"profile_email={self._profile_email!r})")

    # -------------------------
    # Persistence
    # -------------------------

    async def insert(self, connection) -> None:
        """
        Insert this profile as a new row.

        Args:
            connection: Open asyncpg connection, owned by the caller.

        Raises:
            asyncpg.PostgresError: If the store rejects the row, e.g. a
                duplicate id or email.
        """
        await execute_statement(
            connection,
            f"INSERT INTO profile({PROFILE_COLUMNS}) "
            "VALUES ($1, $2, $3, $4, $5, $6, $7, $8)",
            *self._column_values())
        LOGGER.debug("Inserted profile %s", self._profile_id)

    async def update(self, connection) -> None:
        """
        Rewrite every column of the row holding this profile's id. A missing
        row is logged, not raised.
        """
        status = await execute_statement(
            connection,
            'UPDATE profile SET "profileActivationToken" = $2, '
            '"profileFullName" = $3, "profileCaption" = $4, '
            '"profileEmail" = $5, "profileHash" = $6, "profilePhone" = $7, '
            '"profileSalt" = $8 WHERE "profileId" = $1',
            *self._column_values())
        warn_if_no_rows(status, "Profile update", str(self._profile_id))

    async def delete(self, connection) -> None:
        """
        Delete the row holding this profile's id. A missing row is logged,
        not raised.
        """
        status = await execute_statement(
            connection,
            'DELETE FROM profile WHERE "profileId" = $1',
            self._profile_id)
        warn_if_no_rows(status, "Profile delete", str(self._profile_id))

    def _column_values(self) -> tuple:
        return (self._profile_id, self._profile_activation_token,
                self._profile_full_name, self._profile_caption,
                self._profile_email, self._profile_hash, self._profile_phone,
                self._profile_salt)

    # -------------------------
    # Finders
    # -------------------------

    @staticmethod
    def from_row(row) -> "Profile":
        """ Build a Profile from a row keyed by column name. """
        return Profile(row["profileId"], row["profileActivationToken"],
                       row["profileFullName"], row["profileCaption"],
                       row["profileEmail"], row["profileHash"],
                       row["profilePhone"], row["profileSalt"])

    @staticmethod
    async def get_profile_by_profile_id(connection,
                                        profile_id
                                        ) -> typing.Optional["Profile"]:
        """
        Get the profile with the given id.

        Args:
            connection: Open asyncpg connection.
            profile_id (uuid.UUID | str | bytes): Id to search for.

        Returns:
            Profile | None: The profile, or None if not found.

        Raises:
            InvalidArgumentError, OutOfRangeError: If the id is malformed.
        """
        profile_id = validate_uuid(profile_id)
        row = await fetch_row(connection,
                              f'{SELECT_PROFILE} WHERE "profileId" = $1',
                              profile_id)
        return None if row is None else rehydrate(Profile.from_row, row)

    @staticmethod
    async def get_profile_by_profile_email(connection,
                                           profile_email: str
                                           ) -> typing.Optional["Profile"]:
        """
        Get the profile registered with an email address.

        Raises:
            InvalidArgumentError: If the email is not a valid address.
        """
        profile_email = validate_email(profile_email,
                                       PROFILE_EMAIL_MAX_LENGTH)
        row = await fetch_row(connection,
                              f'{SELECT_PROFILE} WHERE "profileEmail" = $1',
                              profile_email)
        return None if row is None else rehydrate(Profile.from_row, row)

    @staticmethod
    async def get_profile_by_profile_activation_token(
            connection,
            profile_activation_token: str) -> typing.Optional["Profile"]:
        """
        Get the profile awaiting activation with the given token.

        Raises:
            InvalidArgumentError: If the token is empty or not hexadecimal.
            OutOfRangeError: If the token is not 32 characters.
        """
        profile_activation_token = validate_hex(
            profile_activation_token, "profile activation token",
            ACTIVATION_TOKEN_LENGTH)
        row = await fetch_row(
            connection,
            f'{SELECT_PROFILE} WHERE "profileActivationToken" = $1',
            profile_activation_token)
        return None if row is None else rehydrate(Profile.from_row, row)

    @staticmethod
    async def get_profiles_by_profile_full_name(connection,
                                                profile_full_name: str
                                                ) -> list["Profile"]:
        """
        Get the profiles whose full name contains the given text. Matching
        is case-sensitive and wildcards in the text match literally.

        Raises:
            InvalidArgumentError: If the text is empty once sanitized.
        """
        profile_full_name = sanitize_string(profile_full_name,
                                            "profile full name")
        if not profile_full_name:
            raise InvalidArgumentError("profile full name search is empty "
                                       "or insecure")

        rows = await fetch_rows(
            connection,
            f'{SELECT_PROFILE} WHERE "profileFullName" LIKE $1',
            f"%{escape_like(profile_full_name)}%")
        return [rehydrate(Profile.from_row, row) for row in rows]

    # -------------------------
    # Serialization
    # -------------------------

    def serialize(self) -> dict:
        """
        Flat mapping for external transmission. The activation token, hash
        and salt are left out.
        """
        return {
            "profileId": str(self._profile_id),
            "profileFullName": self._profile_full_name,
            "profileCaption": self._profile_caption,
            "profileEmail": self._profile_email,
            "profilePhone": self._profile_phone,
        }
