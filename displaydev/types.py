"""Common display device types and EDID parsing."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from displaydev.logger import LogLevel, log

__all__ = [
    "HdrState",
    "Resolution",
    "Rational",
    "Point",
    "EdidData",
    "DeviceInfo",
    "EnumeratedDevice",
    "EnumeratedDeviceList",
    "DevicePreparation",
    "SingleDisplayConfiguration",
    "FloatingPoint",
    "parse_edid",
]


class HdrState(enum.Enum):
    """HDR state of a display."""

    Disabled = "Disabled"
    Enabled = "Enabled"


@dataclass(frozen=True)
class Resolution:
    """Display resolution in pixels."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rational:
    """A fraction, used for refresh rates and scales."""

    numerator: int = 0
    denominator: int = 0


@dataclass(frozen=True)
class Point:
    """A point on the desktop."""

    x: int = 0
    y: int = 0


FloatingPoint = Union[float, Rational]


def _fuzzy_equal_floats(lhs: float, rhs: float) -> bool:
    return abs(lhs - rhs) * 1000000000000.0 <= min(abs(lhs), abs(rhs))


def _fuzzy_equal(lhs: FloatingPoint, rhs: FloatingPoint) -> bool:
    lhs_rational = isinstance(lhs, Rational)
    if lhs_rational != isinstance(rhs, Rational):
        return False
    if lhs_rational:
        return lhs == rhs
    return _fuzzy_equal_floats(float(lhs), float(rhs))


@dataclass(frozen=True)
class EdidData:
    """Identification data parsed from an EDID block."""

    manufacturer_id: str = ""
    product_code: str = ""
    serial_number: int = 0


_EDID_HEADER = bytes([0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x00])
_EDID_BLOCK_SIZE = 128


def parse_edid(data: bytes) -> Optional[EdidData]:
    """Parse the base EDID block, returning None if it is missing or invalid."""
    data = bytes(data)
    if not data:
        return None

    if len(data) < _EDID_BLOCK_SIZE:
        log(LogLevel.warning, f"EDID data size is too small: {len(data)}")
        return None

    if data[: len(_EDID_HEADER)] != _EDID_HEADER:
        log(LogLevel.warning, "EDID data does not contain fixed header.")
        return None

    if sum(data[:_EDID_BLOCK_SIZE]) % 256 != 0:
        log(LogLevel.warning, "EDID checksum verification failed.")
        return None

    byte_a, byte_b = data[8], data[9]
    offset = ord("@")
    codes = (
        offset + ((byte_a & 0x7C) >> 2),
        offset + ((byte_a & 0x03) << 3) + ((byte_b & 0xE0) >> 5),
        offset + (byte_b & 0x1F),
    )
    if any(not ord("A") <= code <= ord("Z") for code in codes):
        log(LogLevel.warning, "EDID manufacturer id is out of range.")
        return None

    product = int.from_bytes(data[10:12], "little")
    serial = int.from_bytes(data[12:16], "little")
    return EdidData(
        manufacturer_id="".join(map(chr, codes)),
        product_code=f"{product:04X}",
        serial_number=serial,
    )


@dataclass(eq=False)
class DeviceInfo:
    """Information about an active display device."""

    resolution: Resolution = field(default_factory=Resolution)
    resolution_scale: FloatingPoint = 0.0
    refresh_rate: FloatingPoint = 0.0
    primary: bool = False
    origin_point: Point = field(default_factory=Point)
    hdr_state: Optional[HdrState] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeviceInfo):
            return NotImplemented
        return (
            self.resolution == other.resolution
            and _fuzzy_equal(self.resolution_scale, other.resolution_scale)
            and _fuzzy_equal(self.refresh_rate, other.refresh_rate)
            and self.primary == other.primary
            and self.origin_point == other.origin_point
            and self.hdr_state == other.hdr_state
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass
class EnumeratedDevice:
    """A display device available in the system."""

    device_id: str = ""
    display_name: str = ""
    friendly_name: str = ""
    edid: Optional[EdidData] = None
    info: Optional[DeviceInfo] = None


EnumeratedDeviceList = list[EnumeratedDevice]


class DevicePreparation(enum.Enum):
    """How a device is prepared before applying a configuration."""

    VerifyOnly = "VerifyOnly"
    EnsureActive = "EnsureActive"
    EnsurePrimary = "EnsurePrimary"
    EnsureOnlyDisplay = "EnsureOnlyDisplay"


@dataclass
class SingleDisplayConfiguration:
    """Configuration to apply to a single display."""

    device_id: str = ""
    device_prep: DevicePreparation = DevicePreparation.VerifyOnly
    resolution: Optional[Resolution] = None
    refresh_rate: Optional[FloatingPoint] = None
    hdr_state: Optional[HdrState] = None