"""BLE scanning and parsing module."""

from .scanner import BeaconScanner

__all__ = ["BeaconScanner"]
