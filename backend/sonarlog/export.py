from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence

import pandas as pd
from pandas import DataFrame

from .models import SonarRecord

CSV_COLUMNS = [
    "latitude",
    "longitude",
    "timestamp",
    "water_depth",
    "bottom_density_1",
    "bottom_density_10",
    "bottom_density_100",
]

DECIMALS = {
    "latitude": 7,
    "longitude": 7,
    "water_depth": 2,
    "bottom_density_1": 1,
    "bottom_density_10": 1,
    "bottom_density_100": 1,
}


def fixed(value: float, decimals: int) -> str:
    """
    Format like the web viewer's `toFixed`: ties on the exact binary value
    round away from zero, so 2.25 gives "2.3" where `format` gives "2.2".
    """
    quantum = Decimal(1).scaleb(-decimals)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def iso_timestamp(ts: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix."""
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def records_to_dataframe(records: Sequence[SonarRecord]) -> DataFrame:
    rows = [{col: getattr(r, col) for col in CSV_COLUMNS} for r in records]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def format_record(record: SonarRecord) -> List[str]:
    line = []
    for col in CSV_COLUMNS:
        if col == "timestamp":
            line.append(iso_timestamp(record.timestamp))
        else:
            line.append(fixed(float(getattr(record, col)), DECIMALS[col]))
    return line


def records_to_csv(records: Sequence[SonarRecord]) -> str:
    out = pd.DataFrame([format_record(r) for r in records], columns=CSV_COLUMNS)
    return out.to_csv(index=False, lineterminator="\n")
