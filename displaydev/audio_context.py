"""Audio context capture interface and a no-op implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["AudioContext", "NoopAudioContext"]


class AudioContext(ABC):
    """Captures and restores the audio context of displays around topology changes."""

    @abstractmethod
    def capture(self) -> bool:
        """Capture the current audio context; return True on success."""

    @abstractmethod
    def is_captured(self) -> bool:
        """Tell whether a context is currently captured."""

    @abstractmethod
    def release(self) -> None:
        """Release the captured context."""


class NoopAudioContext(AudioContext):
    """Audio context that only tracks whether it is captured."""

    def __init__(self) -> None:
        self._captured = False

    def capture(self) -> bool:
        self._captured = True
        return True

    def is_captured(self) -> bool:
        return self._captured

    def release(self) -> None:
        self._captured = False