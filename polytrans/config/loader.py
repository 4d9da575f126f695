"""Configuration file loader and validator.

Handles reading, formatting, and validating settings from the INI configuration file.
Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import ast
import configparser
import logging
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from polytrans.models.config_models import Config
from polytrans.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "ALLOWED_TRANSLATION_ENGINES",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALLOWED_TRANSLATION_ENGINES: Final[list[str]] = ["google", "google2", "microsoft", "bing", "yandex", "deepl"]
ALLOWED_LOG_LEVELS: Final[list[str]] = ["NOTSET", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Loads the INI file into a Config and validates it.

    Args:
        config_filename (str | Path): INI file to load.
        script_name (str): Name of the calling script, used in the not-found message.
        debug (bool): Force DEBUG mode regardless of the file.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(self, *, config_filename: str | Path, script_name: str = "", debug: bool = False) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = f"Configuration file '{config_filename}' not found."
            if script_name:
                msg += f" Please create '{config_path.name}' in the same directory as '{script_name}'."
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()

        try:
            parser.read(config_path, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self._convert_settings(parser)
        if debug:
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            self._convert_section_field(parser, formatter, section)

    def _convert_section_field(
        self, parser: ConfigParser, formatter: _ConfigFormatter, section: DataclassField[Any]
    ) -> None:
        """Convert all fields of one configuration section.

        Args:
            parser (ConfigParser): Parsed INI data.
            formatter (_ConfigFormatter): Formatter used to coerce string values to typed values.
            section (Field[Any]): Target configuration section dataclass field.

        Raises:
            ConfigFormatError: If a value fails to format correctly.
        """
        for key in fields(getattr(self.config, section.name)):
            if not parser.has_option(section.name, key.name):
                logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                continue

            formatted_value = formatter.apply_format(section, key)
            setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate the loaded settings.

        Raises:
            ConfigFormatError: If validation fails for any setting.
        """
        self._validate_log_level()
        self._inspect_defined_item("TRANSLATION", "ENGINE", ALLOWED_TRANSLATION_ENGINES)
        self._validate_non_negative("TRANSLATION", "TIMEOUT")
        for name in ALLOWED_TRANSLATION_ENGINES:
            self._validate_non_negative(name.upper(), "TIMEOUT")
        if not self.config.TRANSLATION.GOOGLE_SUFFIX:
            msg = "'TRANSLATION.GOOGLE_SUFFIX' must not be empty."
            raise ConfigValueError(msg)

    def _validate_log_level(self) -> None:
        general = self.config.GENERAL
        if general.DEBUG:
            general.LOG_LEVEL = "DEBUG"
            return

        if not isinstance(general.LOG_LEVEL, str):
            msg: str = f"Unsupported type used for 'GENERAL.LOG_LEVEL': {type(general.LOG_LEVEL)}"
            raise ConfigTypeError(msg)
        level: str = general.LOG_LEVEL.upper()
        if level not in ALLOWED_LOG_LEVELS:
            msg = f"Unknown logging level for 'GENERAL.LOG_LEVEL': {general.LOG_LEVEL}"
            raise ConfigValueError(msg)
        general.LOG_LEVEL = level

    def _inspect_defined_item(self, section_name: str, key_name: str, defined_list: list[str]) -> None:
        """Verify that configuration values match allowed options.

        Logs warnings for unrecognized values but does not raise exceptions.

        Raises:
            ConfigTypeError: If the configured value is neither a list of str nor a str.
        """
        value: Any = getattr(getattr(self.config, section_name), key_name)
        field_name: str = f"{section_name}.{key_name}"

        if isinstance(value, str):
            value = [value]
            setattr(getattr(self.config, section_name), key_name, value)
        if not isinstance(value, list) or not all(isinstance(val, str) for val in value):
            msg: str = f"Unsupported type used for '{field_name}': {type(value)}"
            raise ConfigTypeError(msg)

        for val in value:
            if val not in defined_list:
                logger.warning("Unknown value '%s' is set for '%s'", val, field_name)

    def _validate_non_negative(self, section_name: str, key_name: str) -> None:
        value: float = getattr(getattr(self.config, section_name), key_name)
        if value < 0:
            msg: str = f"'{section_name}.{key_name}' must not be negative: {value}"
            raise ConfigValueError(msg)


class _ConfigFormatter:
    """Converts INI string values to typed Python objects (bool, int, float, str, list)."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert INI value to the type of the Config field's default value.

        Strings and lists are read as Python literals, so strings must be quoted.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigFormatError: If literal evaluation fails due to invalid syntax.
            ConfigTypeError: If an unexpected type is encountered during coercion.
        """
        formatters: dict[type, Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float]] = {
            bool: self.parse_as_boolean,
            int: self.parse_as_integer,
            float: self.parse_as_float,
        }

        default: Any = getattr(getattr(self.config, section.name), key.name)
        formatter: Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float] | None = formatters.get(
            type(default)
        )
        if formatter:
            try:
                return formatter(section, key)
            except ValueError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigValueError(msg) from err
            except TypeError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigTypeError(msg) from err

        value_str: str = self.parser[section.name][key.name]
        try:
            value: Any = ast.literal_eval(value_str)
        except ValueError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigFormatError(msg) from err

        if isinstance(default, str) and not isinstance(value, str):
            msg = f"Expected a quoted string for {section.name}.{key.name}: {value_str}"
            raise ConfigTypeError(msg)
        return value

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        value: str = self.parser.get(section.name, key.name)
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return float(value)

    def parse_as_integer(self, section: DataclassField[Any], key: DataclassField[Any]) -> int:
        value: str = self.parser.get(section.name, key.name)
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return int(float(value))

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        return self.parser.getboolean(section.name, key.name)
