"""
Copyright (C) 2026  Data Design Development Team
SPDX-License-Identifier: AGPL-3.0-or-later

This file is part of Data Design. See the LICENSE file in the project
root for full license details.
"""
import enum
import typing
from dataclasses import dataclass

TRUE_STRINGS = {"true", "1", "yes", "on"}
FALSE_STRINGS = {"false", "0", "no", "off"}


def parse_bool(value: typing.Any) -> bool:
    """
    Read a boolean from a configuration value.

    Raises:
        ValueError: If the value is not one of the accepted spellings.
    """
    if isinstance(value, bool):
        return value

    lowered = str(value).strip().lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False

    raise ValueError(f"invalid boolean '{value}'")


def parse_uint(value: typing.Any) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(f"invalid unsigned int '{value}'")
    return number


class ConfigItemDataType(enum.Enum):
    """ Type of a configuration item and the parser that produces it. """
    BOOLEAN = (parse_bool,)
    INT = (int,)
    STRING = (str,)
    UNSIGNED_INT = (parse_uint,)

    def parse(self, value: typing.Any) -> typing.Any:
        return self.value[0](value)


@dataclass(frozen=True)
class ConfigurationSetupItem:
    """
    A single typed entry within a configuration section.

    Attributes:
        item_name (str): Key of the item within its section.
        item_type (ConfigItemDataType): Type the raw value is converted to.
        valid_values (list | None): Values the converted item may take, or
            None for no restriction.
        is_required (bool): Whether a missing value is an error.
        default_value: Used when neither environment nor file set the item.
    """

    item_name: str
    item_type: ConfigItemDataType
    valid_values: typing.Optional[list] = None
    is_required: bool = False
    default_value: typing.Optional[object] = None

    def env_var_name(self, prefix: str, section: str) -> str:
        """ Name of the environment variable overriding this item. """
        return f"{prefix}_{section}_{self.item_name}".upper()

    def convert(self, section: str, raw_value: typing.Any) -> typing.Any:
        """
        Convert a raw value to the item's type and check it against the
        valid values.

        Raises:
            ValueError: If the value cannot be converted or is not allowed.
        """
        try:
            value = self.item_type.parse(raw_value)
        except (ValueError, TypeError) as ex:
            raise ValueError(
                f"[ConfigError] '{section}::{self.item_name}' expects "
                f"{self.item_type.name.lower()}: {ex}") from ex

        if self.valid_values and value not in self.valid_values:
            raise ValueError(
                f"[ConfigError] '{section}::{self.item_name}' has invalid "
                f"value '{value}', expected one of {self.valid_values}")

        return value


class ConfigurationSetup:
    """
    Layout of a configuration: section names mapped to the items each
    section is expected to hold.
    """

    def __init__(self,
                 setup_items: dict[str, list[ConfigurationSetupItem]]
                 ) -> None:
        if not isinstance(setup_items, dict):
            raise TypeError("setup_items must be a dict[str, "
                            "list[ConfigurationSetupItem]]")

        for section, items in setup_items.items():
            for item in items:
                if not isinstance(item, ConfigurationSetupItem):
                    raise TypeError(f"section '{section}' holds {item!r}, "
                                    "not a ConfigurationSetupItem")

        self._items = setup_items

    def get_sections(self) -> list[str]:
        return list(self._items.keys())

    def __iter__(self) -> typing.Iterator[tuple[str, ConfigurationSetupItem]]:
        """ Yield (section name, item) for every item in layout order. """
        for section, items in self._items.items():
            for item in items:
                yield section, item
