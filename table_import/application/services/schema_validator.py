"""
Validación de los campos de match contra el esquema de la tabla.
"""
from __future__ import annotations

from typing import Iterable, List

from table_import.domain.entities import TableSchema


def normalize_match_fields(match_fields: Iterable[str]) -> List[str]:
    """Recorta espacios, descarta vacíos y duplicados (mantiene el orden)."""
    normalized: List[str] = []
    for name in match_fields:
        name = name.strip()
        if name and name not in normalized:
            normalized.append(name)
    return normalized


def validate_match_fields(match_fields: Iterable[str], schema: TableSchema) -> List[str]:
    """
    Retorna los campos de match que no son columnas de la tabla.

    Lista vacía = configuración válida. No lanza ni imprime nada: el
    reporte es responsabilidad del llamador.
    """
    return [name for name in match_fields if not schema.has_column(name)]
