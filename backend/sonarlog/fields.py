from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .models import SonarRecord


class ColorField(str, Enum):
    """Numeric record fields the map can be colored by."""

    WATER_DEPTH = "water_depth"
    BOTTOM_DENSITY_1 = "bottom_density_1"
    BOTTOM_DENSITY_10 = "bottom_density_10"
    BOTTOM_DENSITY_100 = "bottom_density_100"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]

    def read(self, record: SonarRecord) -> float:
        return FIELD_ACCESSORS[self](record)


FIELD_LABELS = {
    ColorField.WATER_DEPTH: "Water Depth (m)",
    ColorField.BOTTOM_DENSITY_1: "Bottom Density (1px)",
    ColorField.BOTTOM_DENSITY_10: "Bottom Density (10px avg)",
    ColorField.BOTTOM_DENSITY_100: "Bottom Density (100px avg)",
}

FIELD_ACCESSORS: Dict[ColorField, Callable[[SonarRecord], float]] = {
    ColorField.WATER_DEPTH: lambda r: r.water_depth,
    ColorField.BOTTOM_DENSITY_1: lambda r: float(r.bottom_density_1),
    ColorField.BOTTOM_DENSITY_10: lambda r: r.bottom_density_10,
    ColorField.BOTTOM_DENSITY_100: lambda r: r.bottom_density_100,
}

DEFAULT_FIELD = ColorField.WATER_DEPTH


def field_values(records: Sequence[SonarRecord], field: ColorField) -> List[float]:
    return [field.read(r) for r in records]


def field_range(records: Sequence[SonarRecord], field: ColorField) -> Optional[Tuple[float, float]]:
    values = field_values(records, field)
    if not values:
        return None
    return min(values), max(values)


def value_triples(records: Sequence[SonarRecord], field: ColorField) -> List[Tuple[float, float, float]]:
    """(latitude, longitude, value) for each record, in scan order."""
    return [(r.latitude, r.longitude, field.read(r)) for r in records]
