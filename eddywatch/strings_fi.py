"""Finnish (fi) strings for EddyWatch output."""

STRINGS: dict = {
    # ── Frame types ───────────────────────────────────────────────────
    "frame_unknown": "Tuntematon kehystyyppi",
    "frame_uid": "UID-kehys",
    "frame_url": "URL-kehys",
    "frame_tlm": "TLM-kehys",

    # ── Beacon summaries ──────────────────────────────────────────────
    "beacon_uid": "Eddystone {beacon_id}, lähetysteho: {tx_power}, RSSI: {rssi}",
    "beacon_url": "Eddystone URL: {url}",
    "beacon_tlm": "Eddystone lämpötila: {temperature:.2f}°C akku: {battery} mV",
    "beacon_tlm_uptime": "käynnissä: {uptime}, mainoksia: {count}",
    "beacon_unknown": "Tuntemattoman tyypin Eddystone-kehys",

    # ── Console ───────────────────────────────────────────────────────
    "console_scanning": "Etsitään Eddystone-majakoita...",
    "console_scanning_for": "Etsitään Eddystone-majakoita {seconds} s...",
    "console_summary": lambda n, **_: f"{n} majakka havaittu" if n == 1 else f"{n} majakkaa havaittu",

    # ── Decode command ────────────────────────────────────────────────
    "decode_invalid_hex": "Virheellinen heksadata: {error}",
    "decode_failed": "Kehystä ei voitu purkaa: {error}",
    "decode_unknown_frame": "Ei tunnettu Eddystone-kehys",

    # ── Time formatting ───────────────────────────────────────────────
    "time_uptime_dhm": "{d} pv {h} h {m} min",
    "time_uptime_hm": "{h} h {m} min",
    "time_uptime_m": "{m} min",
}
