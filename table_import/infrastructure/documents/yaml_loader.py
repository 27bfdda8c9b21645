"""
Carga de documentos de configuración YAML (PyYAML, safe_load).
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from table_import.shared.exceptions.domain import DocumentParseError


class YamlDocumentLoader:
    """
    Carga un archivo YAML y retorna su contenido como mapping.

    - Ruta vacía o que no es un archivo: None
    - Archivo vacío: mapping vacío
    - YAML inválido, archivo ilegible o raíz que no es mapping: DocumentParseError
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: str) -> Optional[Mapping[str, Any]]:
        if not path or not Path(path).is_file():
            return None

        try:
            with open(path, encoding=self._encoding) as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DocumentParseError(str(path), f"YAML inválido: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentParseError(str(path), str(e)) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise DocumentParseError(
                str(path), f"la raíz debe ser un mapping, llegó {type(document).__name__}"
            )
        return document
