"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import configparser
import os
import typing
from .configuration_setup import ConfigurationSetup, ConfigurationSetupItem


class Configuration:
    """
    Typed configuration read from environment variables, an optional INI
    file and the layout defaults, in that order of precedence.

    An item ``port`` in section ``database`` is looked up first in the
    environment variable ``<PREFIX>_DATABASE_PORT``, then in the file.
    """

    def __init__(self, env_prefix: str = "DATA_DESIGN"):
        self._parser = configparser.ConfigParser()
        self._env_prefix: str = env_prefix
        self._config_file: typing.Optional[str] = None
        self._has_config_file: bool = False
        self._config_file_required: bool = False
        self._layout: typing.Optional[ConfigurationSetup] = None
        self._config_items: dict[str, dict[str, typing.Any]] = {}

    def configure(self,
                  layout: ConfigurationSetup,
                  config_file: typing.Optional[str] = None,
                  file_required: bool = False) -> None:
        """
        Set the layout and the optional configuration file.

        Args:
            layout: Schema definition of configuration (required).
            config_file: Path to config file (optional).
            file_required: Whether file must exist and be readable.
        """
        if layout is None:
            raise ValueError("Configuration layout cannot be None.")

        self._config_file = config_file
        self._config_file_required = file_required
        self._layout = layout

    def process_config(self) -> None:
        """
        Read every item named by the layout.

        Raises:
            RuntimeError: If configure() has not been called.
            ValueError: If the file is unreadable when required, a required
                item is missing or an item has an invalid value.
        """
        if self._layout is None:
            raise RuntimeError("Configuration layout must be set before "
                               "processing.")

        if self._config_file:
            try:
                files_read = self._parser.read(self._config_file)
            except configparser.Error as ex:
                raise ValueError(
                    f"[ConfigError] Failed to parse file '{self._config_file}'"
                    f": {ex}") from ex

            if not files_read and self._config_file_required:
                raise ValueError(
                    f"[ConfigError] Required config file '{self._config_file}'"
                    " could not be opened.")

            self._has_config_file = bool(files_read)

        for section_name in self._layout.get_sections():
            self._config_items.setdefault(section_name, {})

        for section_name, item in self._layout:
            raw_value = self._lookup_value(section_name, item)
            if raw_value is None:
                if item.is_required:
                    raise ValueError(
                        f"[ConfigError] Missing required '{section_name}"
                        f"::{item.item_name}'")
                value = None
            else:
                value = item.convert(section_name, raw_value)

            self._config_items[section_name][item.item_name] = value

    def get_entry(self, section: str, item: str) -> typing.Any:
        """
        Get a parsed configuration value.

        Raises:
            ValueError: If section or item not found.
        """
        try:
            return self._config_items[section][item]
        except KeyError as ex:
            raise ValueError(
                f"[ConfigError] Invalid key '{section}::{item}'") from ex

    def _lookup_value(self,
                      section: str,
                      item: ConfigurationSetupItem) -> typing.Any:
        value = os.getenv(item.env_var_name(self._env_prefix, section))

        if value is None and self._has_config_file:
            value = self._parser.get(section, item.item_name, fallback=None)

        return value if value is not None else item.default_value
