"""
Interfaz de acceso a la tabla destino.

Este contrato existe para:
- Mantener los casos de uso independientes de SQLAlchemy.
- Facilitar tests unitarios sin levantar una base de datos.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Set

from table_import.domain.entities import MatchClause, Row, TableSchema


class TableGateway(Protocol):
    """
    Acceso a una tabla relacional.

    Implementaciones:
    - SQLAlchemy (infrastructure/database/table_gateway.py).
    - Fake en memoria para tests.
    """

    def inspect_table(self, table: str) -> TableSchema:
        """
        Retorna el esquema de la tabla.

        Si la tabla no existe debe lanzar TableNotFoundException.
        """

    def list_columns(self, table: str) -> Set[str]:
        """Nombres de columnas válidos de la tabla."""

    def find_one(
        self,
        table: str,
        clause: MatchClause,
        bypass_visibility_filters: bool = True,
    ) -> Optional[Row]:
        """Primera fila que cumple todas las igualdades de la cláusula, o None."""

    def count(
        self,
        table: str,
        clause: MatchClause,
        bypass_visibility_filters: bool = True,
    ) -> int:
        """Cantidad de filas que cumplen la cláusula."""

    def update(self, table: str, values: Mapping[str, Any], clause: MatchClause) -> int:
        """Actualiza las filas de la cláusula. Retorna filas afectadas."""

    def insert(self, table: str, values: Mapping[str, Any]) -> bool:
        """Inserta una fila. Retorna True si la escritura fue aceptada."""
