"""Entry point for EddyWatch: python -m eddywatch."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .app import EddyWatchApp
from .ble.parsers import DecodeError, decode_frame
from .config import load_config
from .formatting import frame_type_label
from .i18n import init_lang, t
from .models import AppConfig


def setup_logging(verbose: bool) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from libraries
    logging.getLogger("bleak").setLevel(logging.WARNING)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="eddywatch",
        description="Scan for and decode Eddystone BLE beacon frames",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to configuration file (default: config.yaml, optional)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--lang",
        choices=["en", "fi"],
        default=None,
        help="Output language: en (English, default) or fi (Finnish)",
    )

    parser.add_argument(
        "-d", "--duration",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Stop scanning after this many seconds (default: run until interrupted)",
    )

    parser.add_argument(
        "--decode",
        default=None,
        metavar="HEX",
        help="Decode one Eddystone service data payload given as hex and exit",
    )

    parser.add_argument(
        "--rssi",
        type=int,
        default=0,
        help="RSSI to attach to a --decode result (default: 0)",
    )

    return parser.parse_args(argv)


def decode_command(payload: str, rssi: int, config: AppConfig) -> int:
    """Decode a hex payload and print the result."""
    try:
        frame = bytes.fromhex(payload.replace(":", "").replace(" ", ""))
    except ValueError as e:
        print(t("decode_invalid_hex", error=e))
        return 1

    try:
        info = decode_frame(frame, rssi=rssi, expand_suffixes=config.expand_url_suffixes)
    except DecodeError as e:
        print(t("decode_failed", error=e))
        return 1

    if info is None:
        print(t("decode_unknown_frame"))
        return 1

    print(f"{frame_type_label(info.frame_type)}: {info}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Configuration file is optional; defaults apply without one
    config_path = args.config.resolve()
    if config_path.exists():
        try:
            config = load_config(config_path)
        except (yaml.YAMLError, ValueError) as e:
            logger.error("Invalid configuration file %s: %s", config_path, e)
            return 1
    else:
        logger.debug("No configuration file at %s, using defaults", config_path)
        config = AppConfig()

    # CLI --lang overrides config file
    init_lang(args.lang or config.language)

    if args.decode is not None:
        return decode_command(args.decode, args.rssi, config)

    try:
        app = EddyWatchApp(config, duration=args.duration)
        asyncio.run(app.run())
        return 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
