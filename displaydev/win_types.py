"""Types describing topologies and configuration state of display devices."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Optional

from displaydev.types import HdrState, Rational, Resolution

__all__ = [
    "QueryType",
    "ValidatedPathType",
    "ValidatedDeviceInfo",
    "ActiveTopology",
    "DisplayMode",
    "DeviceDisplayModeMap",
    "HdrStateMap",
    "InitialState",
    "ModifiedState",
    "SingleDisplayConfigState",
    "DdGuardFn",
    "WinWorkarounds",
]


class QueryType(enum.Enum):
    """Kind of device paths to query."""

    Active = "Active"
    All = "All"


class ValidatedPathType(enum.Enum):
    """Extra constraint on a validated device path."""

    Active = "Active"
    Any = "Any"


@dataclass(frozen=True)
class ValidatedDeviceInfo:
    """Device path and id of a valid device."""

    device_path: str = ""
    device_id: str = ""


# A list of groups; devices within one group are duplicated, groups are extended.
ActiveTopology = list[list[str]]


@dataclass(frozen=True)
class DisplayMode:
    """Resolution and refresh rate of a display."""

    resolution: Resolution = field(default_factory=Resolution)
    refresh_rate: Rational = field(default_factory=Rational)


DeviceDisplayModeMap = dict[str, DisplayMode]
HdrStateMap = dict[str, Optional[HdrState]]


@dataclass
class InitialState:
    """The original system state used as a base for re-applying settings."""

    topology: ActiveTopology = field(default_factory=list)
    primary_devices: set[str] = field(default_factory=set)


@dataclass
class ModifiedState:
    """Changes made on top of the initial state."""

    topology: ActiveTopology = field(default_factory=list)
    original_modes: DeviceDisplayModeMap = field(default_factory=dict)
    original_hdr_states: HdrStateMap = field(default_factory=dict)
    original_primary_device: str = ""

    def has_modifications(self) -> bool:
        """True if display modes, HDR states or the primary device were changed."""
        return bool(self.original_modes or self.original_hdr_states or self.original_primary_device)


@dataclass
class SingleDisplayConfigState:
    """Data for making and undoing changes to a single display."""

    initial: InitialState = field(default_factory=InitialState)
    modified: ModifiedState = field(default_factory=ModifiedState)


DdGuardFn = Callable[[], None]


@dataclass(frozen=True)
class WinWorkarounds:
    """Settings for platform workarounds."""

    hdr_blank_delay: Optional[timedelta] = None