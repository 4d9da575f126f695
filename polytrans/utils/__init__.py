"""Utility modules for polytrans.

This package provides the logging setup and the string helpers shared by the translation backends.
"""

from polytrans.utils.logger_utils import LoggerUtils, LogLevel
from polytrans.utils.string_utils import StringUtils

__all__: list[str] = ["LogLevel", "LoggerUtils", "StringUtils"]
