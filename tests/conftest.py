"""
Configuración de fixtures para pytest.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pytest
from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, create_engine
from sqlalchemy.pool import StaticPool

from table_import.domain.entities import MatchClause, TableSchema
from table_import.shared.exceptions.domain import (
    DocumentParseError,
    TableNotFoundException,
    WriteFailedError,
)


FIXED_NOW = datetime(2025, 12, 16, 10, 15, 0, tzinfo=timezone.utc)
FIXED_EPOCH = int(FIXED_NOW.timestamp())


class FakeTableGateway:
    """Tabla en memoria que registra cada consulta y escritura."""

    def __init__(
        self,
        table: str,
        columns: Iterable[str],
        rows: Optional[List[Dict[str, Any]]] = None,
        datetime_columns: Iterable[str] = (),
    ) -> None:
        self.schema = TableSchema(table, frozenset(columns), frozenset(datetime_columns))
        self.rows = [dict(r) for r in rows or []]
        self.queries: List[tuple] = []
        self.updates: List[tuple] = []
        self.inserts: List[Dict[str, Any]] = []
        self.inspect_calls = 0
        self.reject_inserts = False
        self.fail_writes_for: set = set()

    def inspect_table(self, table: str) -> TableSchema:
        self.inspect_calls += 1
        if table != self.schema.name:
            raise TableNotFoundException(table)
        return self.schema

    def list_columns(self, table: str) -> set:
        return set(self.inspect_table(table).columns)

    def _matching(self, clause: MatchClause) -> List[Dict[str, Any]]:
        return [r for r in self.rows if all(r.get(k) == v for k, v in clause)]

    def find_one(self, table, clause, bypass_visibility_filters=True):
        self.queries.append((table, clause, bypass_visibility_filters))
        matches = self._matching(clause)
        return dict(matches[0]) if matches else None

    def count(self, table, clause, bypass_visibility_filters=True):
        self.queries.append((table, clause, bypass_visibility_filters))
        return len(self._matching(clause))

    def update(self, table: str, values: Mapping[str, Any], clause: MatchClause) -> int:
        if clause.as_dict().get("uid") in self.fail_writes_for:
            raise WriteFailedError(table, "update", "simulated")
        matches = self._matching(clause)
        for row in matches:
            row.update(values)
        self.updates.append((dict(values), clause))
        return len(matches)

    def insert(self, table: str, values: Mapping[str, Any]) -> bool:
        if values.get("uid") in self.fail_writes_for:
            raise WriteFailedError(table, "insert", "simulated")
        if self.reject_inserts:
            return False
        self.rows.append(dict(values))
        self.inserts.append(dict(values))
        return True


class FakeDocumentLoader:
    """Documentos en memoria indexados por ruta; un Exception simula un archivo roto."""

    def __init__(self, documents: Dict[str, Any]) -> None:
        self.documents = documents
        self.loaded: List[str] = []

    def load(self, path: str):
        self.loaded.append(path)
        doc = self.documents.get(path)
        if isinstance(doc, Exception):
            raise DocumentParseError(path, str(doc))
        return doc


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def pages_gateway():
    """Tabla 'pages' con una fila existente uid=5."""
    return FakeTableGateway(
        "pages",
        ["uid", "pid", "title", "tags", "tstamp", "crdate", "deleted"],
        rows=[{"uid": 5, "pid": 0, "title": "Old", "tstamp": 1, "crdate": 1, "deleted": 0}],
    )


@pytest.fixture
def sqlite_engine():
    """
    Engine SQLite en memoria con una tabla 'pages' estilo TYPO3.
    StaticPool mantiene una sola conexión para que la tabla persista.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata = MetaData()
    Table(
        "pages",
        metadata,
        Column("uid", Integer, primary_key=True),
        Column("pid", Integer, nullable=False, server_default="0"),
        Column("title", String(255), nullable=False, server_default=""),
        Column("tags", String(255), nullable=True),
        Column("tstamp", Integer, nullable=False, server_default="0"),
        Column("crdate", Integer, nullable=False, server_default="0"),
        Column("deleted", Integer, nullable=False, server_default="0"),
        Column("hidden", Integer, nullable=False, server_default="0"),
    )
    Table(
        "sys_note",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("subject", String(255), nullable=False),
        Column("modified_at", DateTime, nullable=True),
    )
    metadata.create_all(engine)

    yield engine

    metadata.drop_all(engine)
    engine.dispose()
