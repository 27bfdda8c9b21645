"""
Interfaz para cargar documentos de configuración desde disco.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class DocumentLoader(Protocol):
    """
    Carga un archivo y retorna el documento parseado.

    Reglas:
    - Ruta vacía o inexistente: retorna None.
    - Archivo ilegible o mal formado: lanza DocumentParseError.
    """

    def load(self, path: str) -> Optional[Mapping[str, Any]]:
        ...
