"""Display device value types, EDID parsing, settings storage, audio context and logging."""

__version__ = "0.1.0"

__all__ = [
    "audio_context",
    "logger",
    "persistence",
    "types",
    "win_types",
]