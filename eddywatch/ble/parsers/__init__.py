"""Beacon advertisement parsers."""

from .base import BaseParser
from .eddystone import (
    EDDYSTONE_SERVICE_UUID,
    EddystoneParser,
    decode_frame,
    decode_tlm_frame,
    decode_uid_frame,
    decode_url_frame,
    frame_type_for_frame,
)
from .errors import BufferTooShortError, DecodeError, FrameTypeMismatchError

__all__ = [
    "BaseParser",
    "BufferTooShortError",
    "DecodeError",
    "EDDYSTONE_SERVICE_UUID",
    "EddystoneParser",
    "FrameTypeMismatchError",
    "decode_frame",
    "decode_tlm_frame",
    "decode_uid_frame",
    "decode_url_frame",
    "frame_type_for_frame",
]
