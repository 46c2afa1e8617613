"""Decode errors raised by the frame decoders."""

from __future__ import annotations

from ...models import FrameType


class DecodeError(ValueError):
    """A frame could not be decoded."""


class BufferTooShortError(DecodeError):
    """Frame has fewer bytes than its type requires."""

    def __init__(self, frame_type: FrameType, required: int, actual: int) -> None:
        super().__init__(
            f"{frame_type.name} frame too short: {actual} bytes, need at least {required}"
        )
        self.frame_type = frame_type
        self.required = required
        self.actual = actual


class FrameTypeMismatchError(DecodeError):
    """Decoder was called with a frame whose tag byte belongs to another type."""

    def __init__(self, expected: FrameType, actual: int) -> None:
        super().__init__(
            f"Unexpected frame tag 0x{actual:02x} passed to {expected.name} decoder"
        )
        self.expected = expected
        self.actual = actual
