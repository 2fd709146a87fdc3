"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from datetime import datetime, timezone
import re
from data_design.exceptions import InvalidArgumentError, OutOfRangeError

# YYYY-MM-DD HH:MM:SS with optional microseconds, space or T separated.
DATE_TIME_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[ T](\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,6}))?")


def current_time() -> datetime:
    """ Current time as a timezone-aware UTC datetime. """
    return datetime.now(timezone.utc)


def validate_date_time(new_date) -> datetime:
    """
    Normalise a timestamp to a timezone-aware datetime.

    Naive datetimes and strings carry no zone and are taken as UTC.

    Raises:
        InvalidArgumentError: If the value is neither a datetime nor a string
            in the 'YYYY-MM-DD HH:MM:SS[.ffffff]' format.
        OutOfRangeError: If the string is well-formed but names a date or
            time that does not exist.
    """
    if isinstance(new_date, datetime):
        if new_date.tzinfo is None:
            return new_date.replace(tzinfo=timezone.utc)
        return new_date

    if not isinstance(new_date, str):
        raise InvalidArgumentError(
            f"date is not a datetime or string: '{type(new_date).__name__}'")

    match = DATE_TIME_PATTERN.fullmatch(new_date.strip())
    if match is None:
        raise InvalidArgumentError(f"date '{new_date}' is not a valid format")

    year, month, day, hour, minute, second = (
        int(part) for part in match.groups()[:6])
    microsecond = int((match.group(7) or "0").ljust(6, "0"))

    try:
        return datetime(year, month, day, hour, minute, second, microsecond,
                        tzinfo=timezone.utc)

    except ValueError as ex:
        raise OutOfRangeError(f"date '{new_date}' is not a valid date: "
                              f"{ex}") from ex


def to_epoch_milliseconds(value: datetime) -> int:
    """ Milliseconds since the Unix epoch, rounded to the nearest. """
    return round(value.timestamp() * 1000)
