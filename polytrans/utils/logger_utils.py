"""Logging setup shared by every polytrans module.

All loggers live below a single namespace ("PolyTrans" by default) so that an application can route,
silence or raise the verbosity of the whole library through one logger.
"""

from __future__ import annotations

import logging
import sys
import warnings
from logging import Formatter, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, Self, TextIO

if TYPE_CHECKING:
    from pathlib import Path

    from polytrans.models.config_models import Config

__all__: list[str] = ["LogLevel", "LoggerUtils"]

type LevelType = Literal[
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "PolyTrans"


class LogLevel(NamedTuple):
    """Logging level as both name and numeric value.

    Attributes:
        name (str): Level name, e.g. 'INFO'.
        value (int): Numeric level.
    """

    name: str
    value: int


class LoggerUtils:
    """Singleton that owns the handlers of the library's root logger.

    The first instantiation attaches a console handler (WARNING and above, message only) and, when a file name is
    given, a size-rotated file handler that records everything down to DEBUG. Later instantiations return the same
    object without touching the handlers again.

    Attributes:
        _LOGGER_NAMESPACE (str): Namespace prefixed to every logger name.
        _configured (bool): Whether the handlers have been attached.
        _instance (LoggerUtils | None): The singleton instance.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path = "", *, level: LevelType = "INFO", use_null_console: bool = False) -> None:
        """Attach the handlers to the namespace root logger.

        Args:
            filename (str | Path): Absolute path of the log file. If empty, nothing is written to a file.
            level (LevelType): Initial level of the namespace root logger.
            use_null_console (bool): If True, install a NullHandler instead of the console handler.
        """
        if LoggerUtils._configured:
            return

        self.root_logger: logging.Logger = logging.getLogger(self._LOGGER_NAMESPACE)
        self._use_null_console: bool = bool(use_null_console) or sys.stderr is None
        self.set_level(level)

        self._console_logging()
        filename = str(filename)
        if filename.strip():
            self._file_logging(filename)

        warnings.showwarning = self.warning_to_log
        LoggerUtils._configured = True

    @classmethod
    def from_config(cls, config: Config) -> LoggerUtils:
        """Create (or fetch) the singleton using the [GENERAL] section of the configuration.

        Args:
            config (Config): Loaded configuration.

        Returns:
            LoggerUtils: The singleton instance with the configured level applied.
        """
        inst: LoggerUtils = cls(config.GENERAL.LOG_FILE, level=config.GENERAL.LOG_LEVEL)
        inst.set_level(config.GENERAL.LOG_LEVEL)
        return inst

    @classmethod
    def reset(cls) -> None:
        """Detach the handlers installed by this class and forget the singleton."""
        root: logging.Logger = logging.getLogger(cls._LOGGER_NAMESPACE)
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        cls._instance = None
        cls._configured = False

    def warning_to_log(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        """Replacement for warnings.showwarning that writes to the log instead of stderr."""
        _ = file, line
        self.root_logger.warning("%s:%d: %s: %s", filename, lineno, category.__name__, message)

    @classmethod
    def initialize(cls, namespace: str) -> None:
        """Change the logger namespace. Only allowed before the handlers are attached.

        Args:
            namespace (str): New namespace.

        Raises:
            RuntimeError: If the logger is already configured.
        """
        if cls._configured:
            msg = "LoggerUtils is already configured. Reinitialization is not allowed."
            raise RuntimeError(msg)

        cls._LOGGER_NAMESPACE = namespace

    def _console_logging(self) -> None:
        if self._use_null_console:
            if not self._has_handler(NullHandler):
                self.root_logger.addHandler(NullHandler())
            return

        if self._has_handler(StreamHandler):
            self.root_logger.warning("Console logging is already configured.")
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter("%(message)s"))
        self.root_logger.addHandler(console_handler)

    def _file_logging(self, filename: str) -> None:
        """Configure a UTF-8 rotating log file.

        Args:
            filename (str): Absolute path to the log file.
        """
        if self._has_handler(RotatingFileHandler):
            self.root_logger.warning("File logging is already configured.")
            return

        try:
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except (FileNotFoundError, PermissionError):
            self.root_logger.error("Incorrect log file name: %s\nLogging to the file is not performed.", filename)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            Formatter("%(asctime)s %(levelname)-8s %(process)5d %(lineno)4d %(name)-44s\t%(funcName)s\t%(message)s")
        )
        self.root_logger.addHandler(file_handler)

    def _has_handler(self, handler_type: type) -> bool:
        return any(isinstance(h, handler_type) for h in self.root_logger.handlers)

    def set_level(self, level: LevelType | str) -> None:
        """Set the level of the namespace root logger.

        Unknown names fall back to 'INFO' and log a warning.

        Args:
            level (LevelType | str): Level name, case-insensitive.
        """
        level_map: dict[str, int] = logging.getLevelNamesMapping()
        try:
            self.root_logger.setLevel(level_map[level.upper()])
        except KeyError:
            self.root_logger.setLevel(DEFAULT_LOG_LEVEL)
            self.root_logger.warning("Unknown logging level '%s' specified.\nLogging level set to 'INFO'.", level)

    def get_level(self) -> LogLevel:
        """Get the effective level of the namespace root logger.

        Returns:
            LogLevel: Name and numeric value of the level.
        """
        level_value: int = self.root_logger.getEffectiveLevel()
        return LogLevel(name=logging.getLevelName(level_value), value=level_value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Get a logger below the library namespace.

        Args:
            name (str | None): Logger name, usually ``__name__``. If None, the namespace root logger is returned.

        Returns:
            logging.Logger: The logger instance.
        """
        full_name: str | None
        if LoggerUtils._LOGGER_NAMESPACE:
            full_name = f"{LoggerUtils._LOGGER_NAMESPACE}.{name}" if name else LoggerUtils._LOGGER_NAMESPACE
        else:
            full_name = name or None
        return logging.getLogger(full_name)
