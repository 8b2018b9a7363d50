"""Storage backends for persistent settings."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from displaydev.logger import LogLevel, log

__all__ = ["SettingsPersistence", "NoopSettingsPersistence", "FileSettingsPersistence"]


class SettingsPersistence(ABC):
    """Stores and loads an opaque blob of settings."""

    @abstractmethod
    def store(self, data: bytes) -> bool:
        """Store ``data``, replacing what was stored; return True on success."""

    @abstractmethod
    def load(self) -> Optional[bytes]:
        """Return the stored data, empty if nothing is stored, or None on failure."""

    @abstractmethod
    def clear(self) -> bool:
        """Remove the stored data; return True on success."""


class NoopSettingsPersistence(SettingsPersistence):
    """Persistence that keeps nothing."""

    def store(self, data: bytes) -> bool:
        return True

    def load(self) -> Optional[bytes]:
        return b""

    def clear(self) -> bool:
        return True


class FileSettingsPersistence(SettingsPersistence):
    """Persistence backed by a single file."""

    def __init__(self, filepath: Union[str, os.PathLike]) -> None:
        if not os.fspath(filepath):
            raise ValueError("Empty filename provided for FileSettingsPersistence!")
        self._filepath = Path(filepath)

    @property
    def filepath(self) -> Path:
        """Path of the backing file."""
        return self._filepath

    def store(self, data: bytes) -> bool:
        try:
            with self._filepath.open("wb") as stream:
                stream.write(bytes(data))
        except OSError as error:
            log(LogLevel.error, f"Failed to write to {self._filepath}! Error:\n{error}")
            return False
        return True

    def load(self) -> Optional[bytes]:
        try:
            os.stat(self._filepath)
        except (FileNotFoundError, NotADirectoryError):
            return b""
        except OSError as error:
            log(LogLevel.error, f"Failed to load {self._filepath}! Error:\n[{error.errno}] {error.strerror}")
            return None

        try:
            with self._filepath.open("rb") as stream:
                return stream.read()
        except OSError as error:
            log(LogLevel.error, f"Failed to read {self._filepath}! Error:\n{error}")
            return None

    def clear(self) -> bool:
        try:
            if self._filepath.is_dir() and not self._filepath.is_symlink():
                os.rmdir(self._filepath)
            else:
                os.remove(self._filepath)
        except (FileNotFoundError, NotADirectoryError):
            return True
        except OSError as error:
            log(LogLevel.error, f"Failed to remove {self._filepath}! Error:\n[{error.errno}] {error.strerror}")
            return False
        return True