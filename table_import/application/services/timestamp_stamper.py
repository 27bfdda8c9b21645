"""
Estampado de campos de fecha (creación / modificación).
"""
from __future__ import annotations

from datetime import datetime
from typing import Mapping, Sequence

from table_import.domain.entities import FlatRecord, TableSchema
from table_import.shared.utils.datetime_utils import ensure_utc, to_epoch_seconds


def stamp_timestamps(
    record: Mapping[str, object],
    fields: Sequence[str],
    now: datetime,
    schema: TableSchema,
) -> FlatRecord:
    """
    Retorna una copia del registro con `fields` fijados a `now`.

    Solo se estampan campos que existen como columnas de la tabla; el valor
    previo del registro se sobrescribe. Columnas de tipo fecha/hora reciben
    un datetime UTC, el resto segundos Unix.
    """
    stamped = dict(record)
    for name in fields:
        if not schema.has_column(name):
            continue
        if schema.is_datetime_column(name):
            stamped[name] = ensure_utc(now)
        else:
            stamped[name] = to_epoch_seconds(now)
    return stamped
