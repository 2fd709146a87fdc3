"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import secrets
from passlib.crypto.digest import pbkdf2_hmac
from passlib.utils import consteq
from data_design.exceptions import InvalidArgumentError
from data_design.validation import validate_hex

ACTIVATION_TOKEN_LENGTH = 32
PASSWORD_HASH_LENGTH = 128
PASSWORD_SALT_LENGTH = 64

PASSWORD_HASH_DIGEST = "sha512"
PASSWORD_HASH_ROUNDS = 262144


def generate_salt() -> str:
    """ New random password salt as 64 lower-case hex characters. """
    return secrets.token_hex(PASSWORD_SALT_LENGTH // 2)


def generate_activation_token() -> str:
    """ New random activation token as 32 lower-case hex characters. """
    return secrets.token_hex(ACTIVATION_TOKEN_LENGTH // 2)


def hash_password(password: str,
                  salt: str,
                  rounds: int = PASSWORD_HASH_ROUNDS) -> str:
    """
    Derive the stored password hash from a password and its salt.

    The hash is PBKDF2-HMAC-SHA512 over the password, keyed with the salt
    text, rendered as 128 lower-case hex characters.

    Args:
        password (str): Plaintext password.
        salt (str): 64 character hex salt, as held by the profile.
        rounds (int): PBKDF2 iteration count.

    Returns:
        str: The hex encoded hash.

    Raises:
        InvalidArgumentError: If the password is empty or the salt is not hex.
        OutOfRangeError: If the salt is not 64 characters.
    """
    if not isinstance(password, str) or not password:
        raise InvalidArgumentError("password is empty or not a string")

    salt = validate_hex(salt, "profile salt", PASSWORD_SALT_LENGTH)
    return pbkdf2_hmac(PASSWORD_HASH_DIGEST, password, salt, rounds).hex()


def verify_password(password: str,
                    salt: str,
                    expected_hash: str,
                    rounds: int = PASSWORD_HASH_ROUNDS) -> bool:
    """
    Check a plaintext password against a stored salt and hash.

    Returns False for an empty password or a missing hash rather than
    raising.
    """
    if not password or not isinstance(expected_hash, str):
        return False

    candidate = hash_password(password, salt, rounds)
    return consteq(candidate, expected_hash.strip().lower())
