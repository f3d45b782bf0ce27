from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .density import bottom_index, sample_density
from .models import (
    LAYOUTS,
    FileHeader,
    FormatVariant,
    FrameLayout,
    SonarRecord,
    TooShortError,
)
from .projection import projected_to_lonlat
from .timebase import resolve_timestamp

logger = logging.getLogger(__name__)

FEET_TO_METERS = 0.3048
PRIMARY_CHANNEL = 0


def variant_from_filename(name: str) -> FormatVariant:
    """`.sl3` logs use the long frame header; everything else is read as `.sl2`."""
    if Path(name).suffix.lower() == ".sl3":
        return FormatVariant.A
    return FormatVariant.B


def read_file_header(buffer: bytes) -> FileHeader:
    if len(buffer) < FileHeader.SIZE:
        raise TooShortError(f"File header needs {FileHeader.SIZE} bytes, got {len(buffer)}")
    version, device_id = struct.unpack_from("<hh", buffer, 0)
    return FileHeader(version=version, device_id=device_id)


def read_time_base(buffer: bytes, layout: FrameLayout) -> Optional[int]:
    """Epoch seconds stored in the first physical frame, whatever its channel."""
    offset = FileHeader.SIZE + layout.time_base
    if offset + 4 > len(buffer):
        return None
    return struct.unpack_from("<I", buffer, offset)[0]


def decode_frame(buffer: bytes, position: int, layout: FrameLayout, time_base: int) -> Optional[SonarRecord]:
    """
    Decode the frame starting at `position`, or return None when it is not a
    usable primary-channel sounding. The caller guarantees that the whole
    frame header lies inside `buffer`.
    """
    survey_type = struct.unpack_from("<H", buffer, position + layout.survey_type)[0]
    if survey_type != PRIMARY_CHANNEL:
        return None

    x = struct.unpack_from("<i", buffer, position + layout.x)[0]
    y = struct.unpack_from("<i", buffer, position + layout.y)[0]
    if x == 0 or y == 0:
        return None

    min_range = struct.unpack_from("<f", buffer, position + layout.min_range)[0] * FEET_TO_METERS
    max_range = struct.unpack_from("<f", buffer, position + layout.max_range)[0] * FEET_TO_METERS
    if max_range <= min_range:
        return None
    water_depth = struct.unpack_from("<f", buffer, position + layout.water_depth)[0] * FEET_TO_METERS

    frame_size = struct.unpack_from("<H", buffer, position + layout.frame_size)[0]
    signal = buffer[position + layout.header_size:position + frame_size]
    index = bottom_index(len(signal), min_range, max_range, water_depth)
    if index is None:
        return None

    offset_ms = struct.unpack_from("<I", buffer, position + layout.time_offset)[0]
    lon, lat = projected_to_lonlat(x, y)
    density = sample_density(signal, index)
    return SonarRecord(
        latitude=lat,
        longitude=lon,
        timestamp=resolve_timestamp(time_base, offset_ms),
        water_depth=water_depth,
        min_range=min_range,
        max_range=max_range,
        bottom_density_1=density.single,
        bottom_density_10=density.avg_10,
        bottom_density_100=density.avg_100,
        x=x,
        y=y,
    )


def scan_frames(buffer: bytes, layout: FrameLayout, time_base: int) -> List[SonarRecord]:
    records: List[SonarRecord] = []
    position = FileHeader.SIZE
    while position < len(buffer):
        if position + layout.header_size > len(buffer):
            logger.debug("Stopped at %d: not enough data for a frame header", position)
            break
        frame_size = struct.unpack_from("<H", buffer, position + layout.frame_size)[0]
        if frame_size == 0 or position + frame_size > len(buffer):
            logger.debug("Stopped at %d: invalid or incomplete frame (size %d)", position, frame_size)
            break
        record = decode_frame(buffer, position, layout, time_base)
        if record is not None and record.water_depth > 0:
            records.append(record)
        position += frame_size
    return records


def decode_log(buffer: bytes, variant: FormatVariant) -> Tuple[FileHeader, List[SonarRecord]]:
    """Read the file header once and decode every accepted frame after it."""
    header = read_file_header(buffer)
    logger.debug("File version %d, device id %d", header.version, header.device_id)
    layout = LAYOUTS[variant]
    time_base = read_time_base(buffer, layout)
    if time_base is None:
        return header, []
    records = scan_frames(buffer, layout, time_base)
    logger.info("Decoded %d %s records from %d bytes", len(records), variant.value, len(buffer))
    return header, records


def parse_sonar_bytes(buffer: bytes, variant: FormatVariant) -> List[SonarRecord]:
    return decode_log(buffer, variant)[1]


def parse_sonar_file(path: Path, variant: Optional[FormatVariant] = None) -> Dict[str, object]:
    path = Path(path)
    if variant is None:
        variant = variant_from_filename(path.name)
    header, records = decode_log(path.read_bytes(), variant)
    return {"header": header, "variant": variant, "records": records}
