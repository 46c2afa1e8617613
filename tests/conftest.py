"""Pytest fixtures for EddyWatch tests."""

from __future__ import annotations

from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from bleak.backends.device import BLEDevice
from bleak.backends.scanner import AdvertisementData

from eddywatch.ble.parsers.eddystone import EDDYSTONE_SERVICE_UUID
from eddywatch.i18n import init_lang

BEACON_IDENTIFIER = bytes(range(0x10, 0x20))


@pytest.fixture(autouse=True)
def english_strings():
    """Render all output in English unless a test switches language."""
    init_lang("en")
    yield
    init_lang("en")


@pytest.fixture
def uid_frame() -> bytes:
    """UID frame with TX power -29 dBm and identifier 10..1f."""
    return bytes([0x00, 0xE3]) + BEACON_IDENTIFIER + b"\x00\x00"


@pytest.fixture
def url_frame() -> bytes:
    """URL frame for http://www.google."""
    return bytes([0x10, 0x00, 0x00]) + b"google"


@pytest.fixture
def tlm_frame() -> bytes:
    """Full TLM frame: 3100 mV, 20.5 C, 1000 adverts, 1 h uptime."""
    return bytes([0x20, 0x00, 0x0C, 0x1C, 0x14, 0x80]) + (1000).to_bytes(4, "big") + (36000).to_bytes(4, "big")


@pytest.fixture
def mock_device() -> MagicMock:
    """Fixture for mocking a BLEDevice."""
    device = MagicMock(spec=BLEDevice)
    device.address = "aa:bb:cc:dd:ee:ff"
    device.name = "Mock Beacon"
    return device


@pytest.fixture
def make_advertisement() -> Callable[..., MagicMock]:
    """Factory for AdvertisementData mocks carrying Eddystone service data."""

    def _make(
        frame: Optional[bytes],
        rssi: int = -60,
        uuid: str = EDDYSTONE_SERVICE_UUID,
    ) -> MagicMock:
        advert = MagicMock(spec=AdvertisementData)
        advert.rssi = rssi
        advert.service_data = {} if frame is None else {uuid: frame}
        advert.manufacturer_data = {}
        advert.service_uuids = [] if frame is None else [uuid]
        return advert

    return _make
