"""
Lectura de documentos de configuración desde disco.
"""
from .file_finder import find_configuration_files
from .yaml_loader import YamlDocumentLoader

__all__ = ["find_configuration_files", "YamlDocumentLoader"]
