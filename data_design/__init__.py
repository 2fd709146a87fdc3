"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""

# Semantic version components
MAJOR = 1
MINOR = 0
PATCH = 0

# e.g. "alpha", "beta", "rc1", or None
PRE_RELEASE = None

# Version tuple for comparisons
VERSION = (MAJOR, MINOR, PATCH, PRE_RELEASE)

# Construct the string representation
__version__ = f"V{MAJOR}.{MINOR}.{PATCH}"

if PRE_RELEASE:
    __version__ += f"-{PRE_RELEASE}"
