"""
CLI: importa registros desde archivos YAML hacia una tabla.

Por cada registro se buscan filas existentes con los campos de match:
si hay match se actualiza la fila, si no se inserta una nueva.

Ejecución:
  python scripts/import_table.py be_groups title
  python scripts/import_table.py be_users username,pid path/to/be_users.yml

Si no se indica archivo, se importan todos los .yml/.yaml dentro de
directorios llamados 'Configuration' bajo IMPORT_SEARCH_ROOT.

Variables de entorno: ver table_import/core/config.py (DATABASE_URL, IMPORT_*).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from dotenv import load_dotenv
from pydantic import ValidationError

# Permite ejecutar este script desde un checkout sin instalar el paquete.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

# Cargar variables desde .env (antes de instanciar settings)
load_dotenv(_ROOT / ".env", override=False)

from table_import.application.dto.import_dto import ImportTableRequestDTO
from table_import.application.use_cases.import_use_cases import build_from_settings
from table_import.core.config import settings
from table_import.core.logging import configure_logging
from table_import.domain.entities import ImportResult
from table_import.infrastructure.documents.file_finder import find_configuration_files
from table_import.shared.exceptions.domain import ImportConfigurationError


def _print_summary(result: ImportResult) -> None:
    for file_result in result.files:
        if file_result.skipped:
            logger.warning(f"- {file_result.path}: omitido ({file_result.error})")
            continue
        c = file_result.counters
        logger.info(
            f"- {file_result.path}: {file_result.records_found} registros, "
            f"{c.updated} actualizados, {c.inserted} insertados, {c.failed} fallidos"
        )

    logger.info(
        f"Total: {result.total_updated} actualizados, {result.total_inserted} insertados, "
        f"{result.total_failed} fallidos"
    )
    if result.files_skipped:
        logger.warning(f"{result.files_skipped} archivo(s) omitidos")
    logger.success(f"Importación finalizada: {result.files_processed} archivo(s) de configuración procesados.")


def main() -> int:
    parser = argparse.ArgumentParser(description="Importa datos a tablas desde configuración YAML")
    parser.add_argument("table", help="Nombre de la tabla destino")
    parser.add_argument(
        "match_fields",
        help="Lista separada por comas de campos usados para encontrar filas existentes",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help=(
            "Archivo YAML a importar. Si se omite, se procesan todos los YAML "
            f"dentro de directorios '{settings.IMPORT_CONFIGURATION_DIR}'"
        ),
    )
    args = parser.parse_args()

    configure_logging()

    try:
        request = ImportTableRequestDTO(table=args.table, match_fields=args.match_fields, file=args.file)
    except ValidationError as e:
        logger.error(f"Argumentos inválidos: {e}")
        return 2

    logger.info(
        f"Tabla: {request.table} | Campos de match: {', '.join(request.match_fields)} | "
        f"Archivo: {request.file or 'no se indicó ruta'}"
    )

    if request.file is None:
        files = find_configuration_files(
            settings.IMPORT_SEARCH_ROOT,
            settings.IMPORT_CONFIGURATION_DIR,
            settings.file_patterns,
        )
        logger.info(f"Se encontraron {len(files)} archivo(s) de configuración")
    else:
        files = [request.file]

    use_case = build_from_settings(settings)
    try:
        result = use_case.run(request.table, request.match_fields, files)
    except ImportConfigurationError as e:
        logger.error(e.message)
        return 1

    _print_summary(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
