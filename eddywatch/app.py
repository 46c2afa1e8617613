"""Main application coordinator."""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import Optional

from .ble.scanner import BeaconScanner
from .console import ConsoleReporter
from .i18n import t
from .models import AppConfig

logger = logging.getLogger(__name__)


class EddyWatchApp:
    """Wires the beacon scanner to the console reporter."""

    def __init__(
        self,
        config: AppConfig,
        duration: Optional[float] = None,
        reporter: Optional[ConsoleReporter] = None,
    ) -> None:
        self._config = config
        self._duration = duration if duration is not None else config.scan_duration
        self._reporter = reporter or ConsoleReporter()
        self._scanner = BeaconScanner(config, on_beacon=self._reporter.handle)

    @property
    def reporter(self) -> ConsoleReporter:
        return self._reporter

    async def run(self) -> None:
        """Scan until the duration elapses or a shutdown signal arrives."""
        loop = asyncio.get_running_loop()

        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(
                    sig,
                    lambda: asyncio.create_task(self._handle_shutdown()),
                )
            except NotImplementedError:
                # Signal handlers are unavailable on some platforms (e.g. Windows)
                logger.debug("Cannot install handler for %s", sig)

        if self._duration:
            print(t("console_scanning_for", seconds=int(self._duration)))
        else:
            print(t("console_scanning"))

        try:
            await self._scanner.run(self._duration)
        finally:
            self._reporter.print_summary()

    async def _handle_shutdown(self) -> None:
        """Handle shutdown signal."""
        logger.info("Shutdown signal received")
        await self._scanner.stop()
