# displaydev

A small library of building blocks for display device configuration:
value types for resolutions, refresh rates, HDR states and display
topologies, an EDID parser, byte-level settings storage, an audio context
interface and a process-wide logger. It has no dependencies outside the
standard library.

## Installation

```
pip install displaydev
```

For running the test suite:

```
pip install "displaydev[test]"
pytest
```

## Modules

- `displaydev.types`: `Resolution`, `Rational`, `Point`, `EdidData`,
  `DeviceInfo`, `EnumeratedDevice`, `HdrState`, `DevicePreparation` and
  `SingleDisplayConfiguration`. `DeviceInfo` compares its resolution scale
  and refresh rate fuzzily when both are floats; a float never equals a
  `Rational`. `parse_edid(data)` checks the fixed header and the checksum of
  the first 128 bytes and returns an `EdidData` with the three-letter
  manufacturer id, the product code as four upper-case hex digits and the
  serial number, or `None` (with a warning logged) if the data is empty,
  too short or invalid.
- `displaydev.win_types`: `QueryType`, `ValidatedPathType`,
  `ValidatedDeviceInfo`, `DisplayMode`, `InitialState`, `ModifiedState`,
  `SingleDisplayConfigState` and `WinWorkarounds`, plus the aliases
  `ActiveTopology` (a list of device-id groups), `DeviceDisplayModeMap`,
  `HdrStateMap` and `DdGuardFn`. `ModifiedState.has_modifications()` is
  true when original modes, HDR states or a primary device are recorded.
- `displaydev.persistence`: the `SettingsPersistence` interface with
  `store(data)`, `load()` and `clear()`. `FileSettingsPersistence(filepath)`
  keeps the bytes in one file (an empty path raises `ValueError`; loading a
  missing file gives `b""`; failures are logged and reported as `False` or
  `None`). `NoopSettingsPersistence` keeps nothing and always succeeds.
- `displaydev.audio_context`: the `AudioContext` interface with
  `capture()`, `is_captured()` and `release()`, and `NoopAudioContext`,
  which only tracks whether it is captured.
- `displaydev.logger`: `LogLevel` (`verbose` to `fatal`), the singleton
  `Logger` (`Logger.get()`, `set_log_level`, `is_log_level_enabled`,
  `set_custom_callback`, `write`) and the `log(level, message)` shortcut.
  The default level is `info`; without a callback, entries are printed to
  standard output with a local timestamp and a level label.

## Example

```python
from pathlib import Path

from displaydev.persistence import FileSettingsPersistence
from displaydev.types import parse_edid

edid = parse_edid(Path("edid.bin").read_bytes())
if edid is not None:
    print(edid.manufacturer_id, edid.product_code, edid.serial_number)

storage = FileSettingsPersistence("display_state.bin")
storage.store(b"saved settings")
print(storage.load())   # b'saved settings'
storage.clear()
print(storage.load())   # b''
```

## Logging

```python
from displaydev.logger import Logger, LogLevel, log

logger = Logger.get()
logger.set_log_level(LogLevel.debug)
logger.set_custom_callback(lambda level, text: print(level.name, text))
log(LogLevel.info, "hello")
```

## What it does not do

- It does not talk to real displays: nothing here enumerates devices or
  changes topology, display modes, the primary display or HDR states.
- It has no JSON (or other text) encoding of its types. The storage
  backends take and return raw bytes; turning a `SingleDisplayConfigState`
  into bytes and back is left to the caller.
- There is no component that keeps a cached configuration state in step
  with storage, and no logic for applying or reverting a configuration.