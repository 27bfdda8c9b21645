"""
Caso de uso: importar registros de archivos YAML a una tabla.

Flujo por archivo:
- Carga el documento (si no se puede parsear, se omite el archivo)
- Extrae los registros declarados para la tabla
- Por registro: aplanar -> resolver match -> update/insert

Estrategia de errores:
- Campos de match inválidos: fatal, antes de tocar cualquier archivo.
- Archivo ilegible: se omite con diagnóstico, la corrida continúa.
- Error de un registro: se cuenta como fallido, la corrida continúa.
"""
from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable, List, Sequence

from loguru import logger

from table_import.application.interfaces.document_loader import DocumentLoader
from table_import.application.interfaces.table_gateway import TableGateway
from table_import.application.services.field_flattener import DEFAULT_GLUE, flatten_record
from table_import.application.services.match_resolver import MatchResolver
from table_import.application.services.record_extractor import extract_records
from table_import.application.services.schema_validator import (
    normalize_match_fields,
    validate_match_fields,
)
from table_import.application.services.upsert_engine import UpsertEngine
from table_import.domain.entities import (
    FileImportResult,
    ImportCounters,
    ImportResult,
    Record,
    RecordOutcome,
    TableSchema,
)
from table_import.shared.exceptions.domain import (
    DocumentParseError,
    MatchFieldsConfigurationError,
    RecordImportError,
)
from table_import.shared.utils.datetime_utils import utc_now


class ImportTableUseCase:
    """
    Orquestador de la importación para una tabla.

    No guarda contadores en estado compartido: cada archivo retorna sus
    propios contadores y la corrida los agrega en ImportResult.
    """

    def __init__(
        self,
        *,
        gateway: TableGateway,
        loader: DocumentLoader,
        root_path: Sequence[str] = (),
        glue: str = DEFAULT_GLUE,
        tstamp_field: str = "tstamp",
        crdate_field: str = "crdate",
        strict_single_match: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._gateway = gateway
        self._loader = loader
        self._root_path = tuple(root_path)
        self._glue = glue
        self._tstamp_field = tstamp_field
        self._crdate_field = crdate_field
        self._strict_single_match = strict_single_match
        self._clock = clock

    def prepare(self, table: str, match_fields: Iterable[str]) -> tuple[TableSchema, List[str]]:
        """
        Lee el esquema (una vez por corrida) y valida los campos de match.

        Raises:
            TableNotFoundException: si la tabla no existe
            MatchFieldsConfigurationError: si no hay campos o alguno no es columna
        """
        fields = normalize_match_fields(match_fields)
        schema = self._gateway.inspect_table(table)
        missing = validate_match_fields(fields, schema)
        if not fields or missing:
            raise MatchFieldsConfigurationError(table, missing)
        return schema, fields

    def run(self, table: str, match_fields: Iterable[str], file_paths: Iterable[str]) -> ImportResult:
        """
        Ejecuta la importación completa.

        Siempre retorna los contadores finales si la validación inicial pasa.
        """
        schema, fields = self.prepare(table, match_fields)
        resolver = MatchResolver(self._gateway, strict_single_match=self._strict_single_match)
        engine = UpsertEngine(
            self._gateway,
            schema,
            tstamp_field=self._tstamp_field,
            crdate_field=self._crdate_field,
        )

        logger.info(f"Importando configuración de '{table}' (match: {', '.join(fields)})")

        results: List[FileImportResult] = []
        for path in file_paths:
            file_result = self._import_file(path, table, fields, resolver, engine)
            results.append(file_result)

        return ImportResult(table=table, files=results)

    def _import_file(
        self,
        path: str,
        table: str,
        match_fields: Sequence[str],
        resolver: MatchResolver,
        engine: UpsertEngine,
    ) -> FileImportResult:
        try:
            document = self._loader.load(path)
        except DocumentParseError as e:
            logger.error(e.message)
            return FileImportResult(path=path, error=e.reason)

        if document is None:
            logger.warning(f"Archivo omitido (no existe): {path}")
            return FileImportResult(path=path, error="archivo no encontrado")

        logger.info(f"Parseando: {path}")
        records = extract_records(document, table, self._root_path)
        logger.info(f"Se encontraron {len(records)} registros en el archivo.")

        counters = ImportCounters()
        for index, record in enumerate(records):
            outcome = self._import_record(record, table, match_fields, resolver, engine)
            if outcome is RecordOutcome.FAILED:
                logger.warning(f"Registro #{index} de {path} no se pudo importar")
            counters = counters.record(outcome)

        logger.info(
            f"{counters.updated} registros actualizados, {counters.inserted} insertados, "
            f"{counters.failed} fallidos."
        )
        return FileImportResult(path=path, records_found=len(records), counters=counters)

    def _import_record(
        self,
        record: Record,
        table: str,
        match_fields: Sequence[str],
        resolver: MatchResolver,
        engine: UpsertEngine,
    ) -> RecordOutcome:
        try:
            flat = flatten_record(record, self._glue)
            resolution = resolver.resolve(flat, match_fields, table)
            return engine.apply(table, flat, resolution, now=self._clock())
        except RecordImportError as e:
            logger.error(str(e))
            return RecordOutcome.FAILED


def build_from_settings(settings=None) -> ImportTableUseCase:
    """
    Constructor “oficial” del caso de uso leyendo la configuración global.
    """
    from table_import.core.config import settings as default_settings
    from table_import.infrastructure.database.session import create_db_engine
    from table_import.infrastructure.database.table_gateway import SqlAlchemyTableGateway
    from table_import.infrastructure.documents.yaml_loader import YamlDocumentLoader

    settings = settings or default_settings
    gateway = SqlAlchemyTableGateway(
        create_db_engine(settings),
        visibility_columns=settings.visibility_columns,
    )
    return ImportTableUseCase(
        gateway=gateway,
        loader=YamlDocumentLoader(),
        root_path=settings.document_root_path,
        glue=settings.IMPORT_FLATTEN_GLUE,
        tstamp_field=settings.IMPORT_TSTAMP_FIELD,
        crdate_field=settings.IMPORT_CRDATE_FIELD,
        strict_single_match=settings.IMPORT_STRICT_SINGLE_MATCH,
    )
