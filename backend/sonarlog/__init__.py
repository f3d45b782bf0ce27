from .colors import legend_stops, viridis_color
from .export import records_to_csv, records_to_dataframe
from .fields import DEFAULT_FIELD, ColorField, field_range, field_values, value_triples
from .geojson import build_feature_collection
from .models import (
    FileHeader,
    FormatVariant,
    ParseError,
    SonarRecord,
    TooShortError,
)
from .parser import (
    decode_log,
    parse_sonar_bytes,
    parse_sonar_file,
    read_file_header,
    variant_from_filename,
)
from .projection import projected_to_lonlat

__all__ = [
    "ColorField",
    "DEFAULT_FIELD",
    "FileHeader",
    "FormatVariant",
    "ParseError",
    "SonarRecord",
    "TooShortError",
    "build_feature_collection",
    "decode_log",
    "field_range",
    "field_values",
    "legend_stops",
    "parse_sonar_bytes",
    "parse_sonar_file",
    "projected_to_lonlat",
    "read_file_header",
    "records_to_csv",
    "records_to_dataframe",
    "value_triples",
    "variant_from_filename",
    "viridis_color",
]
