"""Configuration loading from YAML."""

import logging
from pathlib import Path

import yaml

from .models import AppConfig, FrameType

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("en", "fi")


def _parse_frame_types(values: list) -> set[FrameType]:
    frame_types = set()
    for value in values:
        try:
            frame_type = FrameType(str(value).lower())
        except ValueError:
            logger.warning("Invalid frame type in configuration: %s", value)
            continue
        if frame_type == FrameType.UNKNOWN:
            logger.warning("Frame type 'unknown' cannot be selected, ignoring")
            continue
        frame_types.add(frame_type)
    return frame_types


def load_config(config_path: Path) -> AppConfig:
    """Load configuration from a YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration must be a mapping, got {type(data).__name__}: {config_path}"
        )

    config = AppConfig()

    language = data.get("language", config.language)
    if language in SUPPORTED_LANGUAGES:
        config.language = language
    else:
        logger.warning("Unsupported language '%s', using '%s'", language, config.language)

    scan_duration = data.get("scan_duration")
    if scan_duration is not None:
        try:
            config.scan_duration = float(scan_duration)
        except (ValueError, TypeError):
            logger.warning("Invalid scan_duration value: %s", scan_duration)

    rssi_threshold = data.get("rssi_threshold")
    if rssi_threshold is not None:
        try:
            config.rssi_threshold = int(rssi_threshold)
        except (ValueError, TypeError):
            logger.warning("Invalid rssi_threshold value: %s", rssi_threshold)

    addresses = data.get("addresses") or []
    if isinstance(addresses, str):
        addresses = [addresses]
    if isinstance(addresses, list):
        config.addresses = {str(mac).upper() for mac in addresses}
    else:
        logger.warning("Invalid addresses value: %s", addresses)
    for mac in config.addresses:
        logger.debug("Watching beacon address: %s", mac)

    if "frame_types" in data:
        raw_frame_types = data.get("frame_types") or []
        if isinstance(raw_frame_types, str):
            raw_frame_types = [raw_frame_types]
        elif not isinstance(raw_frame_types, list):
            logger.warning("Invalid frame_types value: %s", raw_frame_types)
            raw_frame_types = []
        frame_types = _parse_frame_types(raw_frame_types)
        if frame_types:
            config.frame_types = frame_types
        else:
            logger.warning("No valid frame types configured, decoding all types")

    expand_url_suffixes = data.get("expand_url_suffixes", True)
    if isinstance(expand_url_suffixes, bool):
        config.expand_url_suffixes = expand_url_suffixes
    else:
        logger.warning("Invalid expand_url_suffixes value: %s", expand_url_suffixes)

    logger.info(
        "Loaded configuration (%d addresses, frame types: %s)",
        len(config.addresses),
        ", ".join(sorted(ft.value for ft in config.frame_types)),
    )
    return config
