"""
Extracción de registros candidatos desde un documento de configuración.

Formato esperado del documento:

    <tabla>:
      <id_registro>:
        columna: valor
        otra_columna: [a, b]

La sección de la tabla también puede ser una lista de registros.
Opcionalmente las tablas cuelgan de una ruta raíz (p.ej. TYPO3.Data).
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from table_import.domain.entities import Record


def _descend(document: Any, root_path: Sequence[str]) -> Optional[Mapping[str, Any]]:
    node = document
    for key in root_path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node if isinstance(node, Mapping) else None


def extract_records(
    document: Optional[Mapping[str, Any]],
    table: str,
    root_path: Sequence[str] = (),
) -> List[Record]:
    """
    Retorna los registros declarados para `table`, en orden del documento.

    Una sección ausente no es un error: el archivo simplemente no menciona
    la tabla y se retorna una lista vacía.
    """
    tables = _descend(document, root_path)
    if tables is None:
        return []

    section = tables.get(table)
    if section is None:
        return []

    entries: Iterable[tuple[Any, Any]]
    if isinstance(section, Mapping):
        entries = section.items()
    elif isinstance(section, list):
        entries = enumerate(section)
    else:
        logger.warning(f"Sección '{table}' ignorada: se esperaba mapping o lista, llegó {type(section).__name__}")
        return []

    records: List[Record] = []
    for identifier, entry in entries:
        if not isinstance(entry, Mapping):
            logger.warning(f"Registro '{identifier}' de '{table}' ignorado: no es un mapping")
            continue
        records.append(dict(entry))
    return records
