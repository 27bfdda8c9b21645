"""
Servicios del pipeline de reconciliación.
"""
from .field_flattener import DEFAULT_GLUE, flatten_record
from .match_resolver import MatchResolver, build_match_clause
from .record_extractor import extract_records
from .schema_validator import normalize_match_fields, validate_match_fields
from .timestamp_stamper import stamp_timestamps
from .upsert_engine import UpsertEngine

__all__ = [
    "DEFAULT_GLUE",
    "flatten_record",
    "MatchResolver",
    "build_match_clause",
    "extract_records",
    "normalize_match_fields",
    "validate_match_fields",
    "stamp_timestamps",
    "UpsertEngine",
]
