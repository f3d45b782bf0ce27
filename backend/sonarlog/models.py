from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ParseError(Exception):
    """Base class for file-level decoding failures."""


class TooShortError(ParseError):
    """The buffer ends before the structure being read."""


class FormatVariant(str, Enum):
    A = "sl3"
    B = "sl2"


@dataclass(frozen=True)
class FrameLayout:
    """
    Byte offsets of the frame header fields, relative to the frame start.

    `time_base` is relative to the end of the file header and is only read
    from the first frame.
    """

    header_size: int
    frame_size: int
    survey_type: int
    min_range: int
    max_range: int
    water_depth: int
    x: int
    y: int
    time_offset: int
    time_base: int


LAYOUTS = {
    FormatVariant.A: FrameLayout(
        header_size=168,
        frame_size=8,
        survey_type=12,
        min_range=20,
        max_range=24,
        water_depth=48,
        x=92,
        y=96,
        time_offset=124,
        time_base=40,
    ),
    FormatVariant.B: FrameLayout(
        header_size=144,
        frame_size=28,
        survey_type=32,
        min_range=40,
        max_range=44,
        water_depth=64,
        x=108,
        y=112,
        time_offset=140,
        time_base=60,
    ),
}


@dataclass(frozen=True)
class FileHeader:
    version: int
    device_id: int

    SIZE = 8


@dataclass(frozen=True)
class BottomDensity:
    single: int
    avg_10: float
    avg_100: float


@dataclass(frozen=True)
class SonarRecord:
    latitude: float
    longitude: float
    timestamp: datetime
    water_depth: float
    min_range: float
    max_range: float
    bottom_density_1: int
    bottom_density_10: float
    bottom_density_100: float
    x: int
    y: int
