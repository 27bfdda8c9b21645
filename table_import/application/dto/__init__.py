"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .import_dto import ImportTableRequestDTO

__all__ = ["ImportTableRequestDTO"]
