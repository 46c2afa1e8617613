"""English (en) strings for EddyWatch output."""

STRINGS: dict = {
    # ── Frame types ───────────────────────────────────────────────────
    "frame_unknown": "Unknown Frame Type",
    "frame_uid": "UID Frame",
    "frame_url": "URL Frame",
    "frame_tlm": "TLM Frame",

    # ── Beacon summaries ──────────────────────────────────────────────
    "beacon_uid": "Eddystone {beacon_id}, txPower: {tx_power}, RSSI: {rssi}",
    "beacon_url": "Eddystone URL: {url}",
    "beacon_tlm": "Eddystone temperature: {temperature:.2f}°C battery: {battery} mV",
    "beacon_tlm_uptime": "uptime: {uptime}, adverts: {count}",
    "beacon_unknown": "Eddystone frame of unknown type",

    # ── Console ───────────────────────────────────────────────────────
    "console_scanning": "Scanning for Eddystone beacons...",
    "console_scanning_for": "Scanning for Eddystone beacons for {seconds}s...",
    "console_summary": lambda n, **_: f"{n} beacon seen" if n == 1 else f"{n} beacons seen",

    # ── Decode command ────────────────────────────────────────────────
    "decode_invalid_hex": "Invalid hex payload: {error}",
    "decode_failed": "Could not decode frame: {error}",
    "decode_unknown_frame": "Not a recognised Eddystone frame",

    # ── Time formatting ───────────────────────────────────────────────
    "time_uptime_dhm": "{d}d {h}h {m}min",
    "time_uptime_hm": "{h}h {m}min",
    "time_uptime_m": "{m}min",
}
