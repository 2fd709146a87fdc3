"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from .validate_date import (current_time,
                            to_epoch_milliseconds,
                            validate_date_time)
from .validate_text import (escape_like,
                            sanitize_string,
                            validate_email,
                            validate_hex,
                            validate_optional_text,
                            validate_text)
from .validate_uuid import validate_uuid

__all__ = ["current_time", "escape_like", "sanitize_string",
           "to_epoch_milliseconds", "validate_date_time", "validate_email",
           "validate_hex", "validate_optional_text", "validate_text",
           "validate_uuid"]
