"""Console reporter for decoded beacon frames."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from .formatting import format_beacon_info, frame_type_label
from .i18n import t
from .models import BeaconInfo, FrameType

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """Prints decoded beacons to the console.

    A frame is printed when it differs from the last one printed for the
    same address and frame type, so a beacon repeating itself stays quiet.
    RSSI and the attached telemetry frame are ignored in the comparison.
    """

    def __init__(self, output: Optional[Callable[[str], None]] = None) -> None:
        self._output = output or print
        self._last: dict[tuple[str, FrameType], BeaconInfo] = {}

    def handle(self, mac: str, info: BeaconInfo) -> bool:
        """Print a decoded frame unless it repeats the previous one.

        Returns True if a line was printed.
        """
        key = (mac.upper(), info.frame_type)
        comparable = replace(info, rssi=None, telemetry=None)
        if self._last.get(key) == comparable:
            logger.debug("Repeated %s frame from %s suppressed", info.frame_type.name, key[0])
            return False

        self._last[key] = comparable
        timestamp = datetime.now().strftime("%H:%M:%S")
        self._output(
            f"[{timestamp}] {mac.upper()}  {frame_type_label(info.frame_type)}: "
            f"{format_beacon_info(info)}"
        )
        return True

    @property
    def beacon_count(self) -> int:
        """Number of distinct addresses seen."""
        return len({mac for mac, _ in self._last})

    def print_summary(self) -> None:
        """Print the number of distinct beacons seen."""
        self._output(t("console_summary", n=self.beacon_count))
