"""
Descubrimiento de archivos de configuración.

Cuando no se indica un archivo, se importan todos los YAML que estén
dentro de directorios llamados `Configuration` bajo la raíz de búsqueda.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


def find_configuration_files(
    search_root: str,
    directory_name: str = "Configuration",
    patterns: Iterable[str] = ("*.yml", "*.yaml"),
) -> List[str]:
    """
    Retorna las rutas encontradas, ordenadas y sin duplicados.

    Se recorre cada directorio `directory_name` (a cualquier profundidad)
    y se buscan recursivamente los archivos que cumplan `patterns`.
    """
    root = Path(search_root)
    if not root.is_dir():
        return []

    config_dirs = [p for p in root.rglob(directory_name) if p.is_dir()]
    if root.name == directory_name:
        config_dirs.append(root)

    found = set()
    for config_dir in config_dirs:
        for pattern in patterns:
            found.update(str(p) for p in config_dir.rglob(pattern) if p.is_file())
    return sorted(found)
