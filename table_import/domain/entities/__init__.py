"""
Entidades del dominio.
"""
from .records import (
    FlatRecord,
    MatchClause,
    MatchResolution,
    Record,
    Row,
    ScalarValue,
    TableSchema,
)
from .results import FileImportResult, ImportCounters, ImportResult, RecordOutcome

__all__ = [
    "FlatRecord",
    "MatchClause",
    "MatchResolution",
    "Record",
    "Row",
    "ScalarValue",
    "TableSchema",
    "FileImportResult",
    "ImportCounters",
    "ImportResult",
    "RecordOutcome",
]
