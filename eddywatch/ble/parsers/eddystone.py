"""Eddystone service data decoder for UID, URL and TLM frames."""

from __future__ import annotations

import logging
import struct
from typing import Mapping, Optional, Union

from bleak.backends.device import BLEDevice
from bleak.backends.scanner import AdvertisementData

from ...models import BeaconID, BeaconInfo, BeaconType, FrameType
from .base import BaseParser
from .errors import BufferTooShortError, DecodeError, FrameTypeMismatchError

logger = logging.getLogger(__name__)

FrameData = Union[bytes, bytearray, memoryview]

# Eddystone service UUID; bleak keys service data by the full 128-bit form
EDDYSTONE_SERVICE_UUID16 = 0xFEAA
EDDYSTONE_SERVICE_UUID = "0000feaa-0000-1000-8000-00805f9b34fb"

UID_FRAME_TYPE_ID = 0x00
URL_FRAME_TYPE_ID = 0x10
TLM_FRAME_TYPE_ID = 0x20

FRAME_TYPE_IDS = {
    UID_FRAME_TYPE_ID: FrameType.UID,
    URL_FRAME_TYPE_ID: FrameType.URL,
    TLM_FRAME_TYPE_ID: FrameType.TELEMETRY,
}

# Frame type tag + TX power, 16-byte ID
UID_FRAME_MIN_LENGTH = 18
# Frame type tag + TX power + scheme
URL_FRAME_MIN_LENGTH = 3
# Frame type tag + version + battery + temperature
TLM_FRAME_MIN_LENGTH = 6
# ... + advertisement count + uptime
TLM_FRAME_FULL_LENGTH = 14

URL_SCHEME_PREFIXES = {
    0x00: "http://www.",
    0x01: "https://www.",
    0x02: "http://",
    0x03: "https://",
}

URL_SUFFIX_EXPANSIONS = {
    0x00: ".com/",
    0x01: ".org/",
    0x02: ".edu/",
    0x03: ".net/",
    0x04: ".info/",
    0x05: ".biz/",
    0x06: ".gov/",
    0x07: ".com",
    0x08: ".org",
    0x09: ".edu",
    0x0A: ".net",
    0x0B: ".info",
    0x0C: ".biz",
    0x0D: ".gov",
}


def eddystone_service_data(service_data: Optional[Mapping[str, bytes]]) -> Optional[bytes]:
    """Return the Eddystone payload from a service data map, if present."""
    if not service_data:
        return None

    data = service_data.get(EDDYSTONE_SERVICE_UUID)
    if data is not None:
        return bytes(data)

    for key, value in service_data.items():
        if key.lower() in (EDDYSTONE_SERVICE_UUID, f"{EDDYSTONE_SERVICE_UUID16:04x}"):
            return bytes(value)

    return None


def frame_type_for_frame(frame: Optional[FrameData]) -> FrameType:
    """Classify an Eddystone frame by its leading tag byte."""
    if not frame or len(frame) < 2:
        return FrameType.UNKNOWN
    return FRAME_TYPE_IDS.get(frame[0], FrameType.UNKNOWN)


def _check_frame(frame: Optional[FrameData], expected: FrameType, tag: int, min_length: int) -> bytes:
    """Validate tag and length, returning the frame as bytes."""
    data = bytes(frame) if frame else b""

    if len(data) <= 1:
        raise BufferTooShortError(expected, min_length, len(data))
    if data[0] != tag:
        raise FrameTypeMismatchError(expected, data[0])
    if len(data) < min_length:
        raise BufferTooShortError(expected, min_length, len(data))

    return data


def decode_uid_frame(
    frame: FrameData,
    telemetry: Optional[bytes] = None,
    rssi: int = 0,
) -> BeaconInfo:
    """
    Decode a UID frame.

    Format:
    - Byte 0: Frame type (0x00)
    - Byte 1: Calibrated TX power at 0 m (signed)
    - Bytes 2-11: Namespace
    - Bytes 12-17: Instance
    - Bytes 18-19: Reserved
    """
    data = _check_frame(frame, FrameType.UID, UID_FRAME_TYPE_ID, UID_FRAME_MIN_LENGTH)

    tx_power = struct.unpack_from(">b", data, 1)[0]
    beacon_id = BeaconID(kind=BeaconType.EDDYSTONE, identifier=data[2:18])

    return BeaconInfo(
        frame_type=FrameType.UID,
        beacon_id=beacon_id,
        tx_power=tx_power,
        rssi=rssi,
        telemetry=telemetry,
    )


def decode_url_frame(
    frame: FrameData,
    telemetry: Optional[bytes] = None,
    rssi: int = 0,
    expand_suffixes: bool = True,
) -> BeaconInfo:
    """
    Decode a URL frame.

    Format:
    - Byte 0: Frame type (0x10)
    - Byte 1: Calibrated TX power at 0 m (signed)
    - Byte 2: Encoded scheme prefix
    - Bytes 3+: Encoded URL, one character per byte
    """
    data = _check_frame(frame, FrameType.URL, URL_FRAME_TYPE_ID, URL_FRAME_MIN_LENGTH)

    tx_power = struct.unpack_from(">b", data, 1)[0]

    scheme = data[2]
    parts = [URL_SCHEME_PREFIXES.get(scheme, "")]
    if scheme not in URL_SCHEME_PREFIXES:
        logger.debug("Unknown URL scheme code 0x%02x, no prefix added", scheme)

    for byte in data[3:]:
        if expand_suffixes and byte in URL_SUFFIX_EXPANSIONS:
            parts.append(URL_SUFFIX_EXPANSIONS[byte])
        else:
            parts.append(chr(byte))

    return BeaconInfo(
        frame_type=FrameType.URL,
        tx_power=tx_power,
        rssi=rssi,
        telemetry=telemetry,
        url="".join(parts),
    )


def decode_tlm_frame(
    frame: FrameData,
    telemetry: Optional[bytes] = None,
    rssi: int = 0,
) -> BeaconInfo:
    """
    Decode an unencrypted TLM frame.

    Format:
    - Byte 0: Frame type (0x20)
    - Byte 1: TLM version
    - Bytes 2-3: Battery voltage (mV, unsigned, big-endian)
    - Byte 4: Temperature integer part (signed)
    - Byte 5: Temperature fraction (1/256 degree)
    - Bytes 6-9: Advertisement count (optional)
    - Bytes 10-13: Uptime in 0.1 s units (optional)

    RSSI and telemetry are accepted like the other decoders but are not
    carried into the record.
    """
    data = _check_frame(frame, FrameType.TELEMETRY, TLM_FRAME_TYPE_ID, TLM_FRAME_MIN_LENGTH)

    battery_mv = struct.unpack_from(">H", data, 2)[0]
    temp_int, temp_frac = struct.unpack_from(">bB", data, 4)
    temperature = temp_int + temp_frac / 256.0

    advertisement_count = None
    uptime_seconds = None
    if len(data) >= TLM_FRAME_FULL_LENGTH:
        advertisement_count, uptime_raw = struct.unpack_from(">II", data, 6)
        uptime_seconds = uptime_raw / 10.0

    return BeaconInfo(
        frame_type=FrameType.TELEMETRY,
        battery_millivolts=battery_mv,
        temperature_celsius=temperature,
        tlm_version=data[1],
        advertisement_count=advertisement_count,
        uptime_seconds=uptime_seconds,
    )


def decode_frame(
    frame: Optional[FrameData],
    telemetry: Optional[bytes] = None,
    rssi: int = 0,
    expand_suffixes: bool = True,
) -> Optional[BeaconInfo]:
    """Classify a frame and run the matching decoder.

    Returns None for unrecognised frame types. Malformed frames of a known
    type raise DecodeError.
    """
    frame_type = frame_type_for_frame(frame)

    if frame_type == FrameType.UID:
        return decode_uid_frame(frame, telemetry=telemetry, rssi=rssi)
    elif frame_type == FrameType.URL:
        return decode_url_frame(
            frame, telemetry=telemetry, rssi=rssi, expand_suffixes=expand_suffixes
        )
    elif frame_type == FrameType.TELEMETRY:
        return decode_tlm_frame(frame, telemetry=telemetry, rssi=rssi)

    return None


class EddystoneParser(BaseParser):
    """Parser for Eddystone UID, URL and TLM service data frames."""

    beacon_type = BeaconType.EDDYSTONE

    def __init__(self, expand_url_suffixes: bool = True) -> None:
        self._expand_url_suffixes = expand_url_suffixes

    def can_parse(
        self,
        device: BLEDevice,
        advertisement_data: AdvertisementData,
    ) -> bool:
        """Check if this is an Eddystone frame of a known type."""
        data = eddystone_service_data(advertisement_data.service_data)
        return frame_type_for_frame(data) != FrameType.UNKNOWN

    def parse(
        self,
        device: BLEDevice,
        advertisement_data: AdvertisementData,
        telemetry: Optional[bytes] = None,
    ) -> Optional[BeaconInfo]:
        """Parse Eddystone advertisement data.

        ``telemetry`` is the last TLM frame seen from the same device and is
        carried into UID and URL records unchanged.
        """
        data = eddystone_service_data(advertisement_data.service_data)
        if data is None:
            return None

        try:
            return decode_frame(
                data,
                rssi=advertisement_data.rssi,
                telemetry=telemetry,
                expand_suffixes=self._expand_url_suffixes,
            )
        except DecodeError as e:
            logger.warning("Error parsing Eddystone frame from %s: %s", device.address, e)
            return None
