"""Data models for EddyWatch."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

_HEX_SEPARATORS = re.compile(r"[\s:\-]")

# Namespace (10 bytes) + instance (6 bytes)
EDDYSTONE_ID_LENGTH = 16


class BeaconType(Enum):
    """Supported beacon formats."""

    EDDYSTONE = "eddystone"


class FrameType(Enum):
    """Eddystone frame sub-types."""

    UNKNOWN = "unknown"
    UID = "uid"
    URL = "url"
    TELEMETRY = "tlm"


@dataclass(frozen=True)
class BeaconID:
    """Identity of a beacon: format tag plus raw identifier bytes.

    For Eddystone the identifier is the 16-byte namespace + instance pair
    taken from a UID frame. Instances are created by the frame decoders.
    """

    kind: BeaconType
    identifier: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, bytes):
            object.__setattr__(self, "identifier", bytes(self.identifier))

    @property
    def hex(self) -> str:
        """Identifier as lowercase hex, two digits per byte, no separators."""
        return "".join(f"{byte:02x}" for byte in self.identifier)

    @property
    def namespace(self) -> str:
        """Namespace part (first 10 bytes) as hex."""
        return self.identifier[:10].hex()

    @property
    def instance(self) -> str:
        """Instance part (last 6 bytes) as hex."""
        return self.identifier[10:16].hex()

    @classmethod
    def from_hex(cls, text: str, kind: BeaconType = BeaconType.EDDYSTONE) -> BeaconID:
        """Parse a hex rendering produced by ``hex`` back into a BeaconID."""
        cleaned = _HEX_SEPARATORS.sub("", text)
        if len(cleaned) % 2:
            raise ValueError(f"Odd number of hex digits in beacon ID: {text!r}")
        identifier = bytes.fromhex(cleaned)
        if kind == BeaconType.EDDYSTONE and len(identifier) != EDDYSTONE_ID_LENGTH:
            raise ValueError(
                f"Eddystone beacon ID must be {EDDYSTONE_ID_LENGTH} bytes, got {len(identifier)}"
            )
        return cls(kind=kind, identifier=identifier)

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class BeaconInfo:
    """A single decoded Eddystone frame.

    Only the fields belonging to ``frame_type`` are populated:
    UID carries beacon_id/tx_power/rssi, URL carries url/tx_power/rssi,
    TELEMETRY carries battery_millivolts/temperature_celsius.
    """

    frame_type: FrameType
    beacon_id: Optional[BeaconID] = None
    tx_power: Optional[int] = None
    rssi: Optional[int] = None
    telemetry: Optional[bytes] = None
    url: Optional[str] = None
    battery_millivolts: Optional[int] = None
    temperature_celsius: Optional[float] = None
    tlm_version: Optional[int] = None
    advertisement_count: Optional[int] = None
    uptime_seconds: Optional[float] = None

    def __str__(self) -> str:
        from .formatting import format_beacon_info

        return format_beacon_info(self)


@dataclass
class AppConfig:
    """Application configuration."""

    language: str = "en"
    scan_duration: Optional[float] = None
    rssi_threshold: Optional[int] = None
    addresses: set[str] = field(default_factory=set)
    frame_types: set[FrameType] = field(
        default_factory=lambda: {FrameType.UID, FrameType.URL, FrameType.TELEMETRY}
    )
    expand_url_suffixes: bool = True

    def __post_init__(self) -> None:
        self.addresses = {mac.upper() for mac in self.addresses}

    def accepts_address(self, mac: str) -> bool:
        """Check the address allow-list. An empty list accepts everything."""
        if not self.addresses:
            return True
        return mac.upper() in self.addresses

    def accepts_rssi(self, rssi: Optional[int]) -> bool:
        """Check a signal strength reading against the configured threshold."""
        if self.rssi_threshold is None or rssi is None:
            return True
        return rssi >= self.rssi_threshold
