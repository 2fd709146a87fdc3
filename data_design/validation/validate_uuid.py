"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import re
import uuid
from data_design.exceptions import InvalidArgumentError, OutOfRangeError

UUID_BYTE_LENGTH = 16

CANONICAL_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-"
    r"[0-9a-fA-F]{12}")


def validate_uuid(new_uuid) -> uuid.UUID:
    """
    Normalise an identifier to a version 4 uuid.UUID.

    Accepts a uuid.UUID (or a driver subclass of one), the canonical
    36 character string form or the 16 byte binary encoding.

    Args:
        new_uuid: Identifier to validate.

    Returns:
        uuid.UUID: The normalised identifier.

    Raises:
        InvalidArgumentError: If the value is not one of the accepted forms.
        OutOfRangeError: If the value is a well-formed uuid but not uuid4.
    """
    if isinstance(new_uuid, uuid.UUID):
        parsed = uuid.UUID(int=new_uuid.int)

    elif isinstance(new_uuid, (bytes, bytearray, memoryview)):
        raw = bytes(new_uuid)
        if len(raw) != UUID_BYTE_LENGTH:
            raise InvalidArgumentError("invalid uuid: binary form must be "
                                       f"{UUID_BYTE_LENGTH} bytes")
        parsed = uuid.UUID(bytes=raw)

    elif isinstance(new_uuid, str):
        if not CANONICAL_UUID_PATTERN.fullmatch(new_uuid):
            raise InvalidArgumentError(f"invalid uuid '{new_uuid}'")
        parsed = uuid.UUID(new_uuid)

    else:
        raise InvalidArgumentError(
            f"invalid uuid type '{type(new_uuid).__name__}'")

    if parsed.version != 4:
        raise OutOfRangeError(f"uuid '{parsed}' is not a valid uuid4")

    return parsed
