"""Framing of debug samples for a serial data visualiser."""

import struct
from collections.abc import Iterator, Sequence

FRAME_START = 0x33
FRAME_END = 0xCC

_PAYLOAD = struct.Struct("<Bbi")


def encode_frame(trigger: int, sample: int, correlation: int) -> bytes:
    """Encode one debug record: start byte, packed payload, end byte."""
    try:
        payload = _PAYLOAD.pack(trigger, sample, correlation)
    except struct.error as exc:
        raise ValueError(f"value out of range for debug frame: {exc}") from exc
    return bytes([FRAME_START]) + payload + bytes([FRAME_END])


def debug_stream(
    corrected: Sequence[int], correlation: Sequence[int]
) -> Iterator[bytes]:
    """Yield one frame per corrected sample; the first frame carries the trigger.

    Correlation values past the end of ``correlation`` are sent as 0.
    """
    for index, sample in enumerate(corrected):
        value = correlation[index] if index < len(correlation) else 0
        yield encode_frame(1 if index == 0 else 0, sample, value)