"""
Configuracion de logging (loguru) para los scripts del importador.
"""
import sys
from typing import Optional

from loguru import logger

from table_import.core.config import settings


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Reemplaza los handlers por defecto de loguru.

    Args:
        level: Nivel minimo (por defecto settings.LOG_LEVEL)
        log_file: Archivo adicional con rotacion (por defecto settings.LOG_FILE;
            vacio = solo consola)
    """
    level = level or settings.LOG_LEVEL
    log_file = settings.LOG_FILE if log_file is None else log_file

    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=LOG_FORMAT,
            rotation="500 MB",
            retention="10 days",
            level=level
        )
