import struct
from typing import Optional

from backend.sonarlog.models import LAYOUTS, FormatVariant


def build_frame(
    variant: FormatVariant,
    *,
    survey_type: int = 0,
    x: int = 1_000_000,
    y: int = 2_000_000,
    min_range_ft: float = 0.0,
    max_range_ft: float = 100.0,
    depth_ft: float = 32.8084,
    offset_ms: int = 0,
    time_base: int = 1_700_000_000,
    signal: bytes = bytes(range(256)),
    frame_size: Optional[int] = None,
) -> bytes:
    layout = LAYOUTS[variant]
    if frame_size is None:
        frame_size = layout.header_size + len(signal)
    frame = bytearray(layout.header_size)
    struct.pack_into("<H", frame, layout.frame_size, frame_size)
    struct.pack_into("<H", frame, layout.survey_type, survey_type)
    struct.pack_into("<f", frame, layout.min_range, min_range_ft)
    struct.pack_into("<f", frame, layout.max_range, max_range_ft)
    struct.pack_into("<f", frame, layout.water_depth, depth_ft)
    struct.pack_into("<i", frame, layout.x, x)
    struct.pack_into("<i", frame, layout.y, y)
    struct.pack_into("<I", frame, layout.time_offset, offset_ms)
    struct.pack_into("<I", frame, layout.time_base, time_base)
    return bytes(frame) + signal


def build_log(*frames: bytes, version: int = 2, device_id: int = 1) -> bytes:
    return struct.pack("<hhI", version, device_id, 0) + b"".join(frames)
