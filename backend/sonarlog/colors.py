from __future__ import annotations

import math
from typing import Dict, List, Tuple

import numpy as np

# Viridis, reversed so that small values get the bright end.
VIRIDIS_HEX = [
    "#440154",
    "#482878",
    "#3e4a89",
    "#31688e",
    "#26828e",
    "#1f9e89",
    "#35b779",
    "#6ece58",
    "#b5de2b",
    "#fde725",
][::-1]


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


VIRIDIS_RGB = np.array([hex_to_rgb(h) for h in VIRIDIS_HEX], dtype=float)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _css(rgb) -> str:
    return f"rgb({int(rgb[0])}, {int(rgb[1])}, {int(rgb[2])})"


def viridis_color(value: float, vmin: float, vmax: float) -> str:
    if vmax == vmin:
        return _css(VIRIDIS_RGB[0])
    t = max(0.0, min(1.0, (value - vmin) / (vmax - vmin)))
    position = t * (len(VIRIDIS_RGB) - 1)
    i = math.floor(position)
    j = math.ceil(position)
    if i == j:
        return _css(VIRIDIS_RGB[i])
    frac = position - i
    mixed = VIRIDIS_RGB[i] + frac * (VIRIDIS_RGB[j] - VIRIDIS_RGB[i])
    return _css([_round_half_up(c) for c in mixed])


def legend_stops(vmin: float, vmax: float, steps: int = 10) -> List[Dict[str, object]]:
    stops = []
    for k in range(steps):
        value = vmin + (vmax - vmin) * (k / (steps - 1))
        stops.append({"value": value, "color": viridis_color(value, vmin, vmax)})
    return stops
