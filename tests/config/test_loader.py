from __future__ import annotations

import logging
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest

from polytrans.config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
)

if TYPE_CHECKING:
    from pathlib import Path


def _write_ini(tmp_path: Path, content: str) -> Path:
    ini_path: Path = tmp_path / "polytrans.ini"
    ini_path.write_text(dedent(content), encoding="utf-8")
    return ini_path


def test_config_loader_raises_for_missing_file(tmp_path: Path) -> None:
    ini_path: Path = tmp_path / "missing.ini"
    with pytest.raises(ConfigFileNotFoundError, match=r"same directory as 'app\.py'"):
        ConfigLoader(config_filename=str(ini_path), script_name="app.py")


def test_config_loader_reads_values(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        LOG_LEVEL = "warning"

        [TRANSLATION]
        ENGINE = ["bing", "google"]
        TIMEOUT = 5
        GOOGLE_SUFFIX = "co.jp"

        [MICROSOFT]
        API_URL = "api.example.test"
        TIMEOUT = 2.5
        """,
    )

    config = ConfigLoader(config_filename=ini_path).config

    assert config.GENERAL.LOG_LEVEL == "WARNING"
    assert config.TRANSLATION.ENGINE == ["bing", "google"]
    assert config.TRANSLATION.TIMEOUT == 5.0
    assert config.TRANSLATION.GOOGLE_SUFFIX == "co.jp"
    assert config.MICROSOFT.API_URL == "api.example.test"
    assert config.engine_timeout("microsoft") == 2.5
    assert config.engine_timeout("bing") == 5.0


def test_missing_sections_keep_defaults(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "[GENERAL]\nDEBUG = False\n")

    config = ConfigLoader(config_filename=ini_path).config

    assert config.TRANSLATION.ENGINE == ["google", "google2", "microsoft", "yandex", "bing"]
    assert config.GOOGLE.API_URL == ""
    assert config.engine_section("unknown").TIMEOUT == 0.0


def test_single_engine_string_becomes_list(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        ENGINE = "yandex"
        """,
    )

    assert ConfigLoader(config_filename=ini_path).config.TRANSLATION.ENGINE == ["yandex"]


def test_debug_flag_forces_debug_level(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        LOG_LEVEL = "ERROR"
        """,
    )

    config = ConfigLoader(config_filename=ini_path, debug=True).config

    assert config.GENERAL.DEBUG is True
    assert config.GENERAL.LOG_LEVEL == "DEBUG"


def test_unknown_engine_is_reported(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="PolyTrans")
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        ENGINE = ["google", "babelfish"]
        """,
    )

    config = ConfigLoader(config_filename=ini_path).config

    assert config.TRANSLATION.ENGINE == ["google", "babelfish"]
    assert "Unknown value 'babelfish' is set for 'TRANSLATION.ENGINE'" in caplog.text


def test_invalid_log_level_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        LOG_LEVEL = "verbose"
        """,
    )

    with pytest.raises(ConfigValueError, match="GENERAL.LOG_LEVEL"):
        ConfigLoader(config_filename=ini_path)


def test_negative_timeout_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [YANDEX]
        TIMEOUT = -1
        """,
    )

    with pytest.raises(ConfigValueError, match="YANDEX.TIMEOUT"):
        ConfigLoader(config_filename=ini_path)


def test_non_numeric_timeout_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        TIMEOUT = soon
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=ini_path)


def test_unquoted_string_raises_format_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [BING]
        API_URL = https://www.bing.com
        """,
    )

    with pytest.raises(ConfigFormatError):
        ConfigLoader(config_filename=ini_path)


def test_non_string_value_for_string_setting_raises_type_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        GOOGLE_SUFFIX = 42
        """,
    )

    with pytest.raises(ConfigTypeError):
        ConfigLoader(config_filename=ini_path)


def test_invalid_translation_engine_type_raises_format_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        ENGINE = 1
        """,
    )

    with pytest.raises(ConfigFormatError):
        ConfigLoader(config_filename=ini_path)


def test_empty_google_suffix_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        GOOGLE_SUFFIX = ""
        """,
    )

    with pytest.raises(ConfigValueError, match="GOOGLE_SUFFIX"):
        ConfigLoader(config_filename=ini_path)


def test_invalid_boolean_value_raises_config_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        DEBUG = maybe
        """,
    )

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=ini_path)
