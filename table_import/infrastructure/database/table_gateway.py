"""
Acceso a la tabla destino con SQLAlchemy Core.

- Esquema por reflexión (una tabla se refleja una sola vez por gateway)
- Consultas de match sin restricciones de visibilidad por defecto
- Cada escritura corre en su propia transacción corta

Los errores de base de datos se traducen a excepciones del importador
para que el caso de uso no dependa de SQLAlchemy.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from loguru import logger
from sqlalchemy import Boolean, DateTime, MetaData, Table, and_, func, or_, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError

from table_import.domain.entities import MatchClause, Row, TableSchema
from table_import.shared.exceptions.domain import (
    RecordImportError,
    TableNotFoundException,
    WriteFailedError,
)

DEFAULT_VISIBILITY_COLUMNS = ("deleted", "hidden")


class SqlAlchemyTableGateway:
    def __init__(
        self,
        engine: Engine,
        visibility_columns: Iterable[str] = DEFAULT_VISIBILITY_COLUMNS,
    ) -> None:
        self._engine = engine
        self._visibility_columns = tuple(visibility_columns)
        self._metadata = MetaData()
        self._tables: Dict[str, Table] = {}

    def _table(self, name: str) -> Table:
        if name not in self._tables:
            try:
                self._tables[name] = Table(name, self._metadata, autoload_with=self._engine)
            except NoSuchTableError as e:
                raise TableNotFoundException(name) from e
        return self._tables[name]

    def inspect_table(self, table: str) -> TableSchema:
        t = self._table(table)
        return TableSchema(
            name=table,
            columns=frozenset(c.name for c in t.columns),
            datetime_columns=frozenset(
                c.name for c in t.columns if isinstance(c.type, DateTime)
            ),
        )

    def list_columns(self, table: str) -> Set[str]:
        return set(self.inspect_table(table).columns)

    def _conditions(self, t: Table, clause: MatchClause, bypass_visibility_filters: bool) -> List[Any]:
        conditions = [t.c[name] == value for name, value in clause]
        if not bypass_visibility_filters:
            for name in self._visibility_columns:
                if name not in t.c:
                    continue
                column = t.c[name]
                hidden_value = False if isinstance(column.type, Boolean) else 0
                conditions.append(or_(column.is_(None), column == hidden_value))
        return conditions

    def find_one(
        self,
        table: str,
        clause: MatchClause,
        bypass_visibility_filters: bool = True,
    ) -> Optional[Row]:
        t = self._table(table)
        stmt = select(t).where(and_(*self._conditions(t, clause, bypass_visibility_filters))).limit(1)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(stmt).mappings().first()
        except SQLAlchemyError as e:
            raise RecordImportError(
                message=f"Falló la consulta de match en '{table}': {e}",
                error_code="MATCH_QUERY_FAILED",
                details={"table": table},
            ) from e
        return dict(row) if row is not None else None

    def count(
        self,
        table: str,
        clause: MatchClause,
        bypass_visibility_filters: bool = True,
    ) -> int:
        t = self._table(table)
        stmt = (
            select(func.count())
            .select_from(t)
            .where(and_(*self._conditions(t, clause, bypass_visibility_filters)))
        )
        try:
            with self._engine.connect() as conn:
                return int(conn.execute(stmt).scalar_one())
        except SQLAlchemyError as e:
            raise RecordImportError(
                message=f"Falló la consulta de match en '{table}': {e}",
                error_code="MATCH_QUERY_FAILED",
                details={"table": table},
            ) from e

    def update(self, table: str, values: Mapping[str, Any], clause: MatchClause) -> int:
        if clause.is_empty:
            # Sin cláusula el UPDATE alcanzaría a toda la tabla.
            raise WriteFailedError(table, "update", "cláusula de match vacía")
        t = self._table(table)
        try:
            stmt = t.update().where(and_(*self._conditions(t, clause, True))).values(_as_column_values(values))
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
                affected = result.rowcount or 0
        except SQLAlchemyError as e:
            raise WriteFailedError(table, "update", str(e)) from e
        logger.debug(f"UPDATE {table} WHERE {clause}: {affected} filas")
        return affected

    def insert(self, table: str, values: Mapping[str, Any]) -> bool:
        t = self._table(table)
        try:
            stmt = t.insert()
            if values:
                stmt = stmt.values(_as_column_values(values))
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as e:
            raise WriteFailedError(table, "insert", str(e)) from e
        return True


def _as_column_values(values: Mapping[str, Any]) -> Dict[str, Any]:
    # YAML permite claves no-string (p.ej. enteros).
    return {str(key): value for key, value in values.items()}
