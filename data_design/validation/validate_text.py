"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import re
import typing
from pydantic import EmailStr, TypeAdapter, ValidationError
from data_design.exceptions import InvalidArgumentError, OutOfRangeError

# Markup tags, including one left unterminated at the end of the string.
MARKUP_TAG_PATTERN = re.compile(r"<[^>]*(?:>|$)")

# Anything outside the characters an email address may legally contain.
EMAIL_UNSAFE_PATTERN = re.compile(
    r"[^A-Za-z0-9!#$%&'*+\-=?^_`{|}~@.\[\]]")

HEX_PATTERN = re.compile(r"[0-9a-f]+")

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def sanitize_string(value: str, field_label: str) -> str:
    """
    Trim a string and strip NUL bytes and markup tags from it.

    Raises:
        InvalidArgumentError: If the value is not a string.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field_label} is not a string")

    value = value.strip().replace("\x00", "")
    return MARKUP_TAG_PATTERN.sub("", value).strip()


def validate_text(value: str, field_label: str, max_length: int) -> str:
    """
    Sanitize a mandatory text field and check it fits its column.

    Raises:
        InvalidArgumentError: If the value is empty or insecure.
        OutOfRangeError: If the sanitized value exceeds max_length.
    """
    value = sanitize_string(value, field_label)

    if not value:
        raise InvalidArgumentError(f"{field_label} is empty or insecure")

    if len(value) > max_length:
        raise OutOfRangeError(f"{field_label} is too large "
                              f"(maximum {max_length} characters)")

    return value


def validate_optional_text(value: typing.Optional[str],
                           field_label: str,
                           max_length: int) -> typing.Optional[str]:
    """ As validate_text, except that None is accepted and kept. """
    if value is None:
        return None

    return validate_text(value, field_label, max_length)


def validate_email(value: str, max_length: int) -> str:
    """
    Sanitize and syntax-check an email address.

    Raises:
        InvalidArgumentError: If empty, insecure or not a valid address.
        OutOfRangeError: If longer than max_length.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError("email is not a string")

    value = EMAIL_UNSAFE_PATTERN.sub("", value.strip())

    if not value:
        raise InvalidArgumentError("email is empty or insecure")

    if len(value) > max_length:
        raise OutOfRangeError(f"email is too large "
                              f"(maximum {max_length} characters)")

    try:
        _EMAIL_ADAPTER.validate_python(value)

    except ValidationError as ex:
        raise InvalidArgumentError(f"'{value}' is not a valid email") from ex

    return value


def validate_hex(value: str,
                 field_label: str,
                 length: int,
                 non_hex_error: type = InvalidArgumentError) -> str:
    """
    Normalise a fixed-length hexadecimal credential to lower case.

    Args:
        value: String to validate.
        field_label: Name used in error messages.
        length: Exact number of hex characters required.
        non_hex_error: Error raised when the value (including an empty one)
            is not made up solely of hex digits.

    Raises:
        InvalidArgumentError: If not a string, or non-hex by default.
        OutOfRangeError: If the length is not exactly length.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field_label} is not a string")

    value = value.strip().lower()

    if not HEX_PATTERN.fullmatch(value):
        raise non_hex_error(f"{field_label} is empty or not hexadecimal")

    if len(value) != length:
        raise OutOfRangeError(f"{field_label} must be {length} characters")

    return value


def escape_like(value: str) -> str:
    """ Escape LIKE metacharacters so that value matches literally. """
    return value.replace("\\", "\\\\") \
                .replace("%", "\\%") \
                .replace("_", "\\_")
