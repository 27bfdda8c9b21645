"""
Aplanado de campos multi-valor.

Una lista (o un set de YAML `!!set`) se convierte en un string unido por
`glue`; los escalares pasan sin cambios. Los mappings no tienen
representación en una columna y se rechazan.

Los booleanos dentro de una lista se escriben como "1" / "" (igual que
la configuración histórica de las tablas de flags).
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from table_import.domain.entities import FlatRecord
from table_import.shared.exceptions.domain import UnsupportedFieldShapeError

DEFAULT_GLUE = ","

MULTI_VALUE_TYPES = (list, tuple, set, frozenset)


def _render(item: Any) -> str:
    if item is None or item is False:
        return ""
    if item is True:
        return "1"
    return str(item)


def _join(field: str, values: Iterable[Any], glue: str) -> str:
    parts = []
    for item in values:
        if isinstance(item, (Mapping,) + MULTI_VALUE_TYPES):
            raise UnsupportedFieldShapeError(field, item)
        parts.append(_render(item))
    return glue.join(parts)


def flatten_record(record: Mapping[str, Any], glue: str = DEFAULT_GLUE) -> FlatRecord:
    """
    Retorna un registro nuevo con todos los valores escalares.

    Los sets no tienen orden propio: se unen ordenados por su texto para
    que dos corridas escriban el mismo valor.

    Raises:
        UnsupportedFieldShapeError: si un campo trae un mapping (o una
            colección que contiene estructuras anidadas)
    """
    flat: FlatRecord = {}
    for key, value in record.items():
        if isinstance(value, (set, frozenset)):
            flat[key] = _join(key, sorted(value, key=_render), glue)
        elif isinstance(value, (list, tuple)):
            flat[key] = _join(key, value, glue)
        elif isinstance(value, Mapping):
            raise UnsupportedFieldShapeError(key, value)
        else:
            flat[key] = value
    return flat
