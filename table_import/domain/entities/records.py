"""
Tipos del dominio de reconciliación: registros, cláusula de match y esquema.

Se mantienen libres de I/O para poder testearlos fácilmente.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

# Valor escalar escribible en una columna.
ScalarValue = Union[str, int, float, bool, date, datetime, None]

# Registro tal como viene del documento (valores escalares o listas de escalares).
Record = Dict[str, Any]

# Registro listo para escribir: todos los valores son escalares.
FlatRecord = Dict[str, ScalarValue]

Row = Mapping[str, Any]


@dataclass(frozen=True)
class MatchClause:
    """
    Conjunción de igualdades (campo, valor) aplicable a un registro.

    El orden es el de los campos de match indicados por el usuario.
    """

    pairs: Tuple[Tuple[str, ScalarValue], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.pairs

    def as_dict(self) -> Dict[str, ScalarValue]:
        return dict(self.pairs)

    def __iter__(self) -> Iterator[Tuple[str, ScalarValue]]:
        return iter(self.pairs)

    def __str__(self) -> str:
        if not self.pairs:
            return "<sin match>"
        return " AND ".join(f"{name}={value!r}" for name, value in self.pairs)


@dataclass(frozen=True)
class MatchResolution:
    """
    Veredicto del resolver: cláusula usada y fila existente (si hay).
    """

    clause: MatchClause
    existing_row: Optional[Row] = None

    @property
    def is_match(self) -> bool:
        return self.existing_row is not None


@dataclass(frozen=True)
class TableSchema:
    """
    Columnas de la tabla destino. Se obtiene una vez por corrida y
    se comparte como solo lectura.

    datetime_columns: columnas de tipo fecha/hora; el resto de columnas
    de timestamp se estampan como segundos Unix.
    """

    name: str
    columns: frozenset = field(default_factory=frozenset)
    datetime_columns: frozenset = field(default_factory=frozenset)

    def has_column(self, column: str) -> bool:
        return column in self.columns

    def is_datetime_column(self, column: str) -> bool:
        return column in self.datetime_columns
