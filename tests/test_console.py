"""
Tests for the console reporter.
"""

from __future__ import annotations

from eddywatch.ble.parsers import decode_tlm_frame, decode_uid_frame
from eddywatch.ble.scanner import BeaconScanner
from eddywatch.console import ConsoleReporter
from eddywatch.models import AppConfig


def make_reporter():
    lines: list[str] = []
    return ConsoleReporter(output=lines.append), lines


def test_prints_new_frame(uid_frame):
    reporter, lines = make_reporter()

    assert reporter.handle("aa:bb:cc:dd:ee:ff", decode_uid_frame(uid_frame, rssi=-60))
    assert len(lines) == 1
    assert "AA:BB:CC:DD:EE:FF  UID Frame: Eddystone 1011" in lines[0]


def test_repeated_frame_is_suppressed_even_if_rssi_changes(uid_frame):
    reporter, lines = make_reporter()

    reporter.handle("aa:bb:cc:dd:ee:ff", decode_uid_frame(uid_frame, rssi=-60))
    printed = reporter.handle("AA:BB:CC:DD:EE:FF", decode_uid_frame(uid_frame, rssi=-65))

    assert not printed
    assert len(lines) == 1


def test_changed_frame_is_printed():
    reporter, lines = make_reporter()

    reporter.handle("aa:bb:cc:dd:ee:ff", decode_tlm_frame(bytes([0x20, 0, 0x0C, 0x1C, 0x14, 0x80])))
    reporter.handle("aa:bb:cc:dd:ee:ff", decode_tlm_frame(bytes([0x20, 0, 0x0C, 0x1C, 0x15, 0x00])))

    assert len(lines) == 2
    assert "21.00°C" in lines[1]


def test_summary_counts_distinct_addresses(uid_frame, tlm_frame):
    reporter, lines = make_reporter()

    reporter.handle("aa:bb:cc:dd:ee:ff", decode_uid_frame(uid_frame))
    reporter.handle("aa:bb:cc:dd:ee:ff", decode_tlm_frame(tlm_frame))
    reporter.handle("11:22:33:44:55:66", decode_uid_frame(uid_frame))
    reporter.print_summary()

    assert reporter.beacon_count == 2
    assert lines[-1] == "2 beacons seen"


def make_pipeline():
    reporter, lines = make_reporter()
    scanner = BeaconScanner(AppConfig(), on_beacon=reporter.handle)
    return scanner, lines


def test_repeated_tlm_through_scanner_prints_once(mock_device, make_advertisement):
    scanner, lines = make_pipeline()
    frame = bytes([0x20, 0x00, 0x0C, 0x1C, 0x14, 0x80])

    for _ in range(3):
        scanner._detection_callback(mock_device, make_advertisement(frame))

    assert len(lines) == 1


def test_uid_not_reprinted_when_tlm_counters_move(mock_device, make_advertisement, uid_frame):
    scanner, lines = make_pipeline()
    tlm_head = bytes([0x20, 0x00, 0x0C, 0x1C, 0x14, 0x80])

    for count in range(3):
        tlm = tlm_head + count.to_bytes(4, "big") + (count * 10).to_bytes(4, "big")
        scanner._detection_callback(mock_device, make_advertisement(tlm))
        scanner._detection_callback(mock_device, make_advertisement(uid_frame, rssi=-60 - count))

    uid_lines = [line for line in lines if "UID Frame" in line]
    tlm_lines = [line for line in lines if "TLM Frame" in line]
    assert len(uid_lines) == 1
    assert len(tlm_lines) == 3
