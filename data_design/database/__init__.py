"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
from .base import Base
from .profile_model import ProfileModel
from .article_model import ArticleModel
from .clap_model import ClapModel

__all__ = ["Base", "ProfileModel", "ArticleModel", "ClapModel"]
