"""
Casos de uso de la aplicacion.
"""
from .import_use_cases import ImportTableUseCase, build_from_settings

__all__ = ["ImportTableUseCase", "build_from_settings"]
