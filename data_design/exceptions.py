"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""


class DataDesignError(Exception):
    """ Base class for every error raised by the entity layer. """


class InvalidArgumentError(DataDesignError, ValueError):
    """
    Raised when a value is malformed, insecure or empty once sanitized, or
    is not of a type the field accepts.
    """


class OutOfRangeError(DataDesignError, ValueError):
    """
    Raised when a value is present and well-formed but falls outside the
    bounds of its field, e.g. text too long or a hex string of the wrong
    fixed length.
    """


class RowConversionError(DataDesignError):
    """
    Raised by a finder when a row returned from the store cannot be turned
    back into an entity. The validation error is chained as the cause.
    """
