"""Process-wide logger with level filtering and an optional custom sink."""

from __future__ import annotations

import enum
import threading
from datetime import datetime
from typing import Callable, ClassVar, Optional

__all__ = ["LogLevel", "Logger", "log"]


class LogLevel(enum.IntEnum):
    """Severity of a log entry, ordered from least to most severe."""

    verbose = 0
    debug = 1
    info = 2
    warning = 3
    error = 4
    fatal = 5


LogCallback = Callable[[LogLevel, str], None]

_LEVEL_LABELS = {
    LogLevel.verbose: "VERBOSE: ",
    LogLevel.debug: "DEBUG:   ",
    LogLevel.info: "INFO:    ",
    LogLevel.warning: "WARNING: ",
    LogLevel.error: "ERROR:   ",
    LogLevel.fatal: "FATAL:   ",
}

_output_lock = threading.Lock()


class Logger:
    """Singleton logger; obtain it through :meth:`Logger.get`."""

    _instance: ClassVar[Optional["Logger"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._enabled_log_level = LogLevel.info
        self._custom_callback: Optional[LogCallback] = None

    @classmethod
    def get(cls) -> "Logger":
        """Return the shared logger instance."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def set_log_level(self, log_level: LogLevel) -> None:
        """Set the lowest level that is still written."""
        self._enabled_log_level = LogLevel(log_level)

    def is_log_level_enabled(self, log_level: LogLevel) -> bool:
        """Tell whether entries of the given level are written."""
        return LogLevel(log_level) >= self._enabled_log_level

    def set_custom_callback(self, callback: Optional[LogCallback]) -> None:
        """Route entries to ``callback`` instead of standard output; None restores the default."""
        self._custom_callback = callback

    def write(self, log_level: LogLevel, value: str) -> None:
        """Write an entry if its level is enabled."""
        if not self.is_log_level_enabled(log_level):
            return

        if self._custom_callback is not None:
            self._custom_callback(LogLevel(log_level), value)
            return

        now = datetime.now()
        line = (
            f"[{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}] "
            f"{_LEVEL_LABELS[LogLevel(log_level)]}{value}"
        )
        with _output_lock:
            print(line, flush=True)


def log(log_level: LogLevel, message: str) -> None:
    """Write ``message`` through the shared logger."""
    Logger.get().write(log_level, message)