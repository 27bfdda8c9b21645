"""
Excepciones del pipeline de importación.

Dos familias:
- ImportConfigurationError: fatal, aborta la corrida antes de procesar archivos.
- RecordImportError: afecta a un solo registro; se captura en el borde
  del registro y se cuenta como fallido.

DocumentParseError queda en medio: invalida un archivo, no la corrida.
"""
from typing import Any, List

from table_import.shared.exceptions.base import AppException


class ImportConfigurationError(AppException):
    """Error de configuración de la corrida (tabla, campos de match)."""

    def __init__(self, message: str, error_code: str = "IMPORT_CONFIGURATION_ERROR", details=None):
        super().__init__(message=message, error_code=error_code, details=details)


class TableNotFoundException(ImportConfigurationError):
    """Excepción cuando la tabla destino no existe."""

    def __init__(self, table: str):
        super().__init__(
            message=f"La tabla '{table}' no existe en la base de datos",
            error_code="TABLE_NOT_FOUND",
            details={"table": table}
        )


class MatchFieldsConfigurationError(ImportConfigurationError):
    """Excepción cuando los campos de match no son columnas de la tabla."""

    def __init__(self, table: str, missing_fields: List[str]):
        if missing_fields:
            message = (
                f"Los campos de match {', '.join(missing_fields)} "
                f"no existen en la tabla '{table}'"
            )
        else:
            message = "Se requiere al menos un campo de match"
        super().__init__(
            message=message,
            error_code="INVALID_MATCH_FIELDS",
            details={"table": table, "missing_fields": list(missing_fields)}
        )
        self.missing_fields = list(missing_fields)


class DocumentParseError(AppException):
    """Un archivo de configuración no se pudo leer o parsear."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"No se pudo parsear '{path}': {reason}",
            error_code="DOCUMENT_PARSE_ERROR",
            details={"path": path, "reason": reason}
        )
        self.path = path
        self.reason = reason


class RecordImportError(AppException):
    """Excepción base para errores de un registro individual."""

    def __init__(self, message: str, error_code: str = "RECORD_IMPORT_ERROR", details=None):
        super().__init__(message=message, error_code=error_code, details=details)


class UnsupportedFieldShapeError(RecordImportError):
    """Un campo trae un valor anidado que no se puede escribir en una columna."""

    def __init__(self, field: str, value: Any):
        super().__init__(
            message=f"El campo '{field}' tiene un valor anidado ({type(value).__name__}) no soportado",
            error_code="UNSUPPORTED_FIELD_SHAPE",
            details={"field": field, "type": type(value).__name__}
        )
        self.field = field


class AmbiguousMatchError(RecordImportError):
    """Más de una fila existente cumple la cláusula de match."""

    def __init__(self, table: str, clause: Any, matches: int):
        super().__init__(
            message=f"{matches} filas de '{table}' coinciden con {clause}",
            error_code="AMBIGUOUS_MATCH",
            details={"table": table, "matches": matches}
        )
        self.matches = matches


class WriteFailedError(RecordImportError):
    """La base de datos rechazó el update/insert del registro."""

    def __init__(self, table: str, operation: str, reason: str):
        super().__init__(
            message=f"Falló {operation} en '{table}': {reason}",
            error_code="WRITE_FAILED",
            details={"table": table, "operation": operation, "reason": reason}
        )
