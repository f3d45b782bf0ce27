from __future__ import annotations

from datetime import datetime, timezone


def resolve_timestamp(time_base: int, offset_ms: int) -> datetime:
    """
    Absolute time of a frame: the file's time base (epoch seconds) plus the
    frame's own millisecond offset. Frames never accumulate on each other.
    """
    seconds = time_base + offset_ms / 1000.0
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
