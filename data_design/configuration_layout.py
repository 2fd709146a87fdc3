"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import os
from data_design.configuration import (Configuration,
                                       ConfigItemDataType,
                                       ConfigurationSetup,
                                       ConfigurationSetupItem)
from data_design.configuration.configuration_setup import parse_bool

CONFIG_FILE_ENV_VAR = "DATA_DESIGN_CONFIG_FILE"
CONFIG_FILE_REQUIRED_ENV_VAR = "DATA_DESIGN_CONFIG_FILE_REQUIRED"

CONFIGURATION_LAYOUT = ConfigurationSetup(
    {
        "logging": [
            ConfigurationSetupItem(
                "log_level", ConfigItemDataType.STRING,
                valid_values=["DEBUG", "INFO", "WARNING", "ERROR"],
                default_value="INFO")
        ],
        "database": [
            ConfigurationSetupItem(
                "host", ConfigItemDataType.STRING,
                default_value="127.0.0.1"),
            ConfigurationSetupItem(
                "port", ConfigItemDataType.UNSIGNED_INT,
                default_value=5432),
            ConfigurationSetupItem(
                "name", ConfigItemDataType.STRING, is_required=True),
            ConfigurationSetupItem(
                "user", ConfigItemDataType.STRING, is_required=True),
            ConfigurationSetupItem(
                "password", ConfigItemDataType.STRING, is_required=True),
        ]
    }
)


def load_configuration() -> Configuration:
    """
    Build and process the configuration, taking the file location and
    whether the file is mandatory from the environment.

    Returns:
        Processed Configuration instance.

    Raises:
        ValueError: If the environment names an invalid 'required' flag, a
            required file is missing or any item is invalid.
    """
    config_file = os.getenv(CONFIG_FILE_ENV_VAR, None)
    raw_required = os.getenv(CONFIG_FILE_REQUIRED_ENV_VAR, "false")

    try:
        config_file_required = parse_bool(raw_required)
    except ValueError as ex:
        raise ValueError(f"[ConfigError] Invalid value for "
                         f"{CONFIG_FILE_REQUIRED_ENV_VAR}: '{raw_required}'"
                         ) from ex

    if not config_file and config_file_required:
        raise ValueError("[ConfigError] Configuration file missing!")

    config = Configuration()
    config.configure(CONFIGURATION_LAYOUT, config_file, config_file_required)
    config.process_config()
    return config
