"""Human-readable rendering of decoded beacon frames."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .i18n import t
from .models import FrameType

if TYPE_CHECKING:
    from .models import BeaconInfo


def format_uptime(seconds: float) -> str:
    """Format beacon uptime in seconds as human-readable string."""
    total_seconds = int(seconds)
    days = total_seconds // 86400
    hours = (total_seconds % 86400) // 3600
    minutes = (total_seconds % 3600) // 60

    if days > 0:
        return t("time_uptime_dhm", d=days, h=hours, m=minutes)
    elif hours > 0:
        return t("time_uptime_hm", h=hours, m=minutes)
    else:
        return t("time_uptime_m", m=minutes)


def frame_type_label(frame_type: FrameType) -> str:
    """Localized name of a frame type."""
    return t(f"frame_{frame_type.value}")


def format_beacon_info(info: BeaconInfo) -> str:
    """One-line summary of a decoded frame, selected by its frame type."""
    if info.frame_type == FrameType.UID:
        return t(
            "beacon_uid",
            beacon_id=info.beacon_id,
            tx_power=info.tx_power,
            rssi=info.rssi,
        )
    elif info.frame_type == FrameType.TELEMETRY:
        text = t(
            "beacon_tlm",
            temperature=info.temperature_celsius,
            battery=info.battery_millivolts,
        )
        if info.uptime_seconds is not None:
            uptime = t(
                "beacon_tlm_uptime",
                uptime=format_uptime(info.uptime_seconds),
                count=info.advertisement_count,
            )
            text = f"{text}, {uptime}"
        return text
    elif info.frame_type == FrameType.URL:
        return t("beacon_url", url=info.url)

    return t("beacon_unknown")
