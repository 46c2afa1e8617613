"""
Tests for YAML configuration loading.
"""

from __future__ import annotations

import pytest

from eddywatch.config import load_config
from eddywatch.models import FrameType


def write_config(tmp_path, text: str):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_empty_file_gives_defaults(tmp_path):
    config = load_config(write_config(tmp_path, ""))

    assert config.language == "en"
    assert config.scan_duration is None
    assert config.rssi_threshold is None
    assert config.addresses == set()
    assert config.frame_types == {FrameType.UID, FrameType.URL, FrameType.TELEMETRY}
    assert config.expand_url_suffixes is True


def test_full_config(tmp_path):
    config = load_config(
        write_config(
            tmp_path,
            """
language: fi
scan_duration: 30
rssi_threshold: -85
addresses:
  - "aa:bb:cc:dd:ee:ff"
frame_types: [uid, TLM]
expand_url_suffixes: false
""",
        )
    )

    assert config.language == "fi"
    assert config.scan_duration == 30.0
    assert config.rssi_threshold == -85
    assert config.addresses == {"AA:BB:CC:DD:EE:FF"}
    assert config.frame_types == {FrameType.UID, FrameType.TELEMETRY}
    assert config.expand_url_suffixes is False


def test_invalid_values_are_skipped(tmp_path, caplog):
    config = load_config(
        write_config(
            tmp_path,
            """
language: sv
scan_duration: soon
rssi_threshold: loud
frame_types: [uid, eid, unknown]
""",
        )
    )

    assert config.language == "en"
    assert config.scan_duration is None
    assert config.rssi_threshold is None
    assert config.frame_types == {FrameType.UID}
    assert "Invalid frame type in configuration: eid" in caplog.text


def test_no_valid_frame_types_keeps_all(tmp_path):
    config = load_config(write_config(tmp_path, "frame_types: [eid]\n"))

    assert config.frame_types == {FrameType.UID, FrameType.URL, FrameType.TELEMETRY}


def test_non_mapping_config_raises(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_config(tmp_path, "- uid\n- url\n"))


def test_quoted_boolean_is_rejected(tmp_path, caplog):
    config = load_config(write_config(tmp_path, 'expand_url_suffixes: "false"\n'))

    assert config.expand_url_suffixes is True
    assert "Invalid expand_url_suffixes value: false" in caplog.text


def test_single_address_string(tmp_path):
    config = load_config(write_config(tmp_path, 'addresses: "aa:bb:cc:dd:ee:ff"\n'))

    assert config.addresses == {"AA:BB:CC:DD:EE:FF"}
    assert config.accepts_address("aa:bb:cc:dd:ee:ff")


def test_invalid_addresses_value_is_ignored(tmp_path, caplog):
    config = load_config(write_config(tmp_path, "addresses: 42\n"))

    assert config.addresses == set()
    assert "Invalid addresses value: 42" in caplog.text


def test_single_frame_type_string(tmp_path):
    config = load_config(write_config(tmp_path, "frame_types: url\n"))

    assert config.frame_types == {FrameType.URL}
