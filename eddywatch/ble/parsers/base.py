"""Base parser class for beacon advertisements."""

from abc import ABC, abstractmethod
from typing import Optional

from bleak.backends.device import BLEDevice
from bleak.backends.scanner import AdvertisementData

from ...models import BeaconInfo, BeaconType


class BaseParser(ABC):
    """Abstract base class for beacon advertisement parsers."""

    beacon_type: BeaconType

    @abstractmethod
    def parse(
        self,
        device: BLEDevice,
        advertisement_data: AdvertisementData,
    ) -> Optional[BeaconInfo]:
        """
        Parse BLE advertisement data and return a BeaconInfo if valid.

        Args:
            device: BLE device information
            advertisement_data: Advertisement data from the device

        Returns:
            BeaconInfo if successfully decoded, None otherwise
        """

    @abstractmethod
    def can_parse(
        self,
        device: BLEDevice,
        advertisement_data: AdvertisementData,
    ) -> bool:
        """
        Check if this parser can handle the given advertisement.

        Args:
            device: BLE device information
            advertisement_data: Advertisement data from the device

        Returns:
            True if this parser can handle the data
        """
