"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from .profile import Profile
from .article import Article
from .clap import Clap

__all__ = ["Profile", "Article", "Clap"]
