"""
DTOs para solicitar una importación.

Normaliza los argumentos crudos del CLI:
- table: se recortan espacios
- match_fields: lista separada por comas (o lista), sin vacíos ni duplicados
- file: ruta opcional; None = descubrir archivos automáticamente
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from table_import.application.services.schema_validator import normalize_match_fields


class ImportTableRequestDTO(BaseModel):
    """Request para importar una tabla desde archivos YAML."""

    table: str = Field(..., min_length=1, description="Tabla destino")
    match_fields: List[str] = Field(..., min_length=1, description="Campos usados para encontrar filas existentes")
    file: Optional[str] = Field(None, description="Archivo YAML a importar")

    @field_validator("table")
    @classmethod
    def strip_table(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("table no puede estar vacío")
        return v

    @field_validator("match_fields", mode="before")
    @classmethod
    def split_match_fields(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            v = v.split(",")
        return normalize_match_fields(v)

    @field_validator("file")
    @classmethod
    def strip_file(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None
