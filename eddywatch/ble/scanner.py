"""BLE scanner that feeds Eddystone service data to the frame decoder."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from bleak import BleakScanner as BleakScannerLib
from bleak.backends.device import BLEDevice
from bleak.backends.scanner import AdvertisementData

from ..models import AppConfig, BeaconInfo, FrameType
from .parsers.eddystone import EddystoneParser, eddystone_service_data, frame_type_for_frame

logger = logging.getLogger(__name__)


class BeaconScanner:
    """BLE scanner that detects and decodes Eddystone advertisements.

    The last TLM frame seen from each address is kept so it can be attached
    to that beacon's UID and URL records.
    """

    # Timeout for stop() operation - don't let it hang forever
    STOP_TIMEOUT_SECONDS = 10

    def __init__(
        self,
        config: AppConfig,
        on_beacon: Optional[Callable[[str, BeaconInfo], None]] = None,
    ) -> None:
        self._config = config
        self._on_beacon = on_beacon
        self._scanner: Optional[BleakScannerLib] = None
        self._running = False
        self._stop_event: Optional[asyncio.Event] = None
        self._parser = EddystoneParser(expand_url_suffixes=config.expand_url_suffixes)
        self._telemetry: dict[str, bytes] = {}

        logger.info(
            "Beacon scanner initialized (frame types: %s)",
            ", ".join(sorted(ft.value for ft in config.frame_types)),
        )

    def _detection_callback(
        self,
        device: BLEDevice,
        advertisement_data: AdvertisementData,
    ) -> None:
        """Handle detected BLE advertisement."""
        mac = device.address.upper()

        if not self._config.accepts_address(mac):
            return
        if not self._config.accepts_rssi(advertisement_data.rssi):
            return

        data = eddystone_service_data(advertisement_data.service_data)
        frame_type = frame_type_for_frame(data)
        if frame_type == FrameType.UNKNOWN:
            return

        # TLM records never carry the previous TLM frame
        telemetry = None if frame_type == FrameType.TELEMETRY else self._telemetry.get(mac)
        info = self._parser.parse(device, advertisement_data, telemetry=telemetry)
        if info is None:
            return

        if info.frame_type == FrameType.TELEMETRY:
            self._telemetry[mac] = data

        if info.frame_type not in self._config.frame_types:
            return

        logger.debug("Decoded %s frame from %s", info.frame_type.name, mac)

        if self._on_beacon:
            try:
                self._on_beacon(mac, info)
            except Exception as e:
                logger.warning("Beacon callback failed for %s: %s", mac, e)

    async def _create_scanner(self) -> BleakScannerLib:
        """Create a fresh scanner instance."""
        return BleakScannerLib(
            detection_callback=self._detection_callback,
        )

    async def _stop_scanner_safe(self) -> None:
        """Stop scanner with timeout protection."""
        if self._scanner is None:
            return

        try:
            await asyncio.wait_for(
                self._scanner.stop(),
                timeout=self.STOP_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError:
            logger.warning("Scanner stop() timed out after %ds", self.STOP_TIMEOUT_SECONDS)
        except Exception as e:
            logger.debug("Error stopping scanner: %s", e)
        finally:
            self._scanner = None

    @property
    def is_running(self) -> bool:
        """Check if scanner is running."""
        return self._running

    async def start(self) -> None:
        """Start BLE scanning."""
        if self._running:
            logger.warning("Scanner already running")
            return

        logger.info("Starting BLE scanner...")
        self._running = True
        self._stop_event = asyncio.Event()
        self._scanner = await self._create_scanner()
        await self._scanner.start()
        logger.info("BLE scanner started")

    async def stop(self) -> None:
        """Stop BLE scanning."""
        if not self._running:
            return

        logger.info("Stopping BLE scanner...")
        self._running = False
        if self._stop_event:
            self._stop_event.set()
        await self._stop_scanner_safe()
        logger.info("BLE scanner stopped")

    async def run(self, duration: Optional[float] = None) -> None:
        """Scan for ``duration`` seconds, or until stop() when duration is None."""
        await self.start()
        try:
            if duration is None:
                await self._stop_event.wait()
            else:
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=duration)
                except asyncio.TimeoutError:
                    logger.info("Scan duration of %.0fs elapsed", duration)
        finally:
            await self.stop()
