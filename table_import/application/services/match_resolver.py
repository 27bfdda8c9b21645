"""
Resolución de match: decide si un registro corresponde a una fila existente.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from loguru import logger

from table_import.application.interfaces.table_gateway import TableGateway
from table_import.domain.entities import FlatRecord, MatchClause, MatchResolution
from table_import.shared.exceptions.domain import AmbiguousMatchError


def build_match_clause(record: Mapping[str, object], match_fields: Sequence[str]) -> MatchClause:
    """
    Construye la cláusula con los campos de match presentes en el registro,
    en el orden indicado.

    Un campo ausente o con valor nulo se omite sin error.
    """
    pairs = tuple(
        (name, record[name])
        for name in match_fields
        if record.get(name) is not None
    )
    return MatchClause(pairs)


class MatchResolver:
    """
    Busca la fila existente para un registro ignorando las restricciones
    de visibilidad (borrados/ocultos), para que también se reconcilien.

    strict_single_match:
        False (default) toma la primera fila aunque haya varias.
        True lanza AmbiguousMatchError si hay más de una.
    """

    def __init__(self, gateway: TableGateway, strict_single_match: bool = False) -> None:
        self._gateway = gateway
        self._strict_single_match = strict_single_match

    def resolve(self, record: FlatRecord, match_fields: Sequence[str], table: str) -> MatchResolution:
        clause = build_match_clause(record, match_fields)
        if clause.is_empty:
            return MatchResolution(clause=clause)

        if self._strict_single_match:
            matches = self._gateway.count(table, clause, bypass_visibility_filters=True)
            if matches > 1:
                raise AmbiguousMatchError(table, clause, matches)
            if matches == 0:
                return MatchResolution(clause=clause)

        row = self._gateway.find_one(table, clause, bypass_visibility_filters=True)
        if row is not None:
            logger.debug(f"Match en '{table}': {clause}")
        return MatchResolution(clause=clause, existing_row=row)
