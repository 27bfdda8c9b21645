"""
Raíz de las excepciones del importador.

Cada error lleva un `error_code` estable (TABLE_NOT_FOUND,
INVALID_MATCH_FIELDS, WRITE_FAILED, ...) que aparece en los logs, y en
`details` la tabla, el archivo o el campo involucrado.
"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Excepción base del importador.

    El orquestador decide qué hacer según la familia (configuración,
    documento o registro), nunca según el mensaje.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "IMPORT_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"
