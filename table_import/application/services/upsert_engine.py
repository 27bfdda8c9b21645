"""
Motor de upsert: update si hubo match, insert si no.

Cada registro produce exactamente una escritura (nunca ambas).
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from loguru import logger

from table_import.application.interfaces.table_gateway import TableGateway
from table_import.application.services.timestamp_stamper import stamp_timestamps
from table_import.domain.entities import FlatRecord, MatchResolution, RecordOutcome, TableSchema
from table_import.shared.utils.datetime_utils import utc_now


class UpsertEngine:
    """
    Escribe un registro aplanado en la tabla según el veredicto del resolver.

    - tstamp_field: se estampa en updates e inserts
    - crdate_field: se estampa solo en inserts
    """

    def __init__(
        self,
        gateway: TableGateway,
        schema: TableSchema,
        *,
        tstamp_field: str = "tstamp",
        crdate_field: str = "crdate",
    ) -> None:
        self._gateway = gateway
        self._schema = schema
        self._tstamp_field = tstamp_field
        self._crdate_field = crdate_field

    def apply(
        self,
        table: str,
        record: FlatRecord,
        resolution: MatchResolution,
        now: Optional[datetime] = None,
    ) -> RecordOutcome:
        """
        Ejecuta el update o insert del registro.

        `now` es el único instante usado para todos los timestamps del registro.
        Los errores de escritura (WriteFailedError) se propagan al llamador.
        """
        now = now or utc_now()

        if resolution.is_match:
            values = stamp_timestamps(record, [self._tstamp_field], now, self._schema)
            affected = self._gateway.update(table, values, resolution.clause)
            if affected:
                return RecordOutcome.UPDATED
            logger.warning(f"Update sin filas afectadas en '{table}' ({resolution.clause})")
            return RecordOutcome.FAILED

        values = stamp_timestamps(record, [self._crdate_field, self._tstamp_field], now, self._schema)
        if self._gateway.insert(table, values):
            return RecordOutcome.INSERTED
        logger.warning(f"Insert rechazado en '{table}'")
        return RecordOutcome.FAILED
