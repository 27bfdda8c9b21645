"""
Resultados de la importación: desenlace por registro y contadores por archivo.

Los contadores son valores inmutables; cada paso devuelve uno nuevo y el
orquestador los acumula explícitamente.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional


class RecordOutcome(str, Enum):
    """Estados terminales de un registro."""

    UPDATED = "updated"
    INSERTED = "inserted"
    FAILED = "failed"


@dataclass(frozen=True)
class ImportCounters:
    updated: int = 0
    inserted: int = 0
    failed: int = 0

    def record(self, outcome: RecordOutcome) -> "ImportCounters":
        """Retorna nuevos contadores con el desenlace sumado."""
        if outcome is RecordOutcome.UPDATED:
            return replace(self, updated=self.updated + 1)
        if outcome is RecordOutcome.INSERTED:
            return replace(self, inserted=self.inserted + 1)
        return replace(self, failed=self.failed + 1)

    def __add__(self, other: "ImportCounters") -> "ImportCounters":
        return ImportCounters(
            updated=self.updated + other.updated,
            inserted=self.inserted + other.inserted,
            failed=self.failed + other.failed,
        )

    @property
    def total(self) -> int:
        return self.updated + self.inserted + self.failed


@dataclass(frozen=True)
class FileImportResult:
    """
    Resultado de un archivo.

    error != None indica que el archivo se omitió (no se pudo parsear).
    """

    path: str
    records_found: int = 0
    counters: ImportCounters = field(default_factory=ImportCounters)
    error: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class ImportResult:
    """Resumen de una corrida completa."""

    table: str
    files: List[FileImportResult] = field(default_factory=list)

    @property
    def counters(self) -> ImportCounters:
        total = ImportCounters()
        for file_result in self.files:
            total = total + file_result.counters
        return total

    @property
    def files_processed(self) -> int:
        return sum(1 for f in self.files if not f.skipped)

    @property
    def files_skipped(self) -> int:
        return sum(1 for f in self.files if f.skipped)

    @property
    def total_updated(self) -> int:
        return self.counters.updated

    @property
    def total_inserted(self) -> int:
        return self.counters.inserted

    @property
    def total_failed(self) -> int:
        return self.counters.failed
