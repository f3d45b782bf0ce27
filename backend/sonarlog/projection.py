from __future__ import annotations

import math
from typing import Tuple

# Polar radius used by the recorders for their spherical Mercator grid.
# Not the WGS84 mean radius; coordinates drift if it is changed.
EARTH_RADIUS = 6356752.3142


def projected_to_lonlat(x: int, y: int) -> Tuple[float, float]:
    """
    Convert the recorder's projected integer coordinates to (lon, lat) degrees.
    """
    lon = x / EARTH_RADIUS * (180 / math.pi)
    lat = (2 * math.atan(math.exp(y / EARTH_RADIUS)) - (math.pi / 2)) * (180 / math.pi)
    return lon, lat
