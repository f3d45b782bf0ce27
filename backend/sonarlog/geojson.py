from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .colors import legend_stops, viridis_color
from .export import iso_timestamp
from .fields import DEFAULT_FIELD, ColorField, field_range
from .models import SonarRecord


def compute_bounds(coords: List[Tuple[float, float]]) -> Optional[List[float]]:
    if not coords:
        return None
    lats = [c[1] for c in coords]
    lons = [c[0] for c in coords]
    return [min(lons), min(lats), max(lons), max(lats)]


def build_feature_collection(
    records: Sequence[SonarRecord],
    field: ColorField = DEFAULT_FIELD,
) -> Dict[str, object]:
    features: List[Dict[str, object]] = []
    all_coords: List[Tuple[float, float]] = []
    value_range = field_range(records, field)
    vmin, vmax = value_range if value_range else (0.0, 0.0)
    for record in records:
        value = field.read(record)
        all_coords.append((record.longitude, record.latitude))
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [record.longitude, record.latitude]},
                "properties": {
                    "timestamp": iso_timestamp(record.timestamp),
                    "water_depth": record.water_depth,
                    "bottom_density_1": record.bottom_density_1,
                    "bottom_density_10": record.bottom_density_10,
                    "bottom_density_100": record.bottom_density_100,
                    "value": value,
                    "color": viridis_color(value, vmin, vmax),
                },
            }
        )
    return {
        "type": "FeatureCollection",
        "features": features,
        "bounds": compute_bounds(all_coords),
        "field": {"name": field.value, "label": field.label},
        "range": {"min": vmin, "max": vmax} if value_range else None,
        "legend": legend_stops(vmin, vmax) if value_range else [],
    }
