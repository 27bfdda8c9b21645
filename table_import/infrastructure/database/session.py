"""
Creación del engine de base de datos (SQLAlchemy, sync).
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from table_import.core.config import Settings, settings as default_settings


def _create_engine_args(settings: Settings, url: str) -> dict:
    """
    Construye los argumentos del engine segun el tipo de base de datos.
    PostgreSQL usa pool de conexiones, SQLite no lo soporta.
    """
    args = {
        "echo": settings.DEBUG,
        "future": True,
    }

    # Configuracion de pool solo para PostgreSQL
    if url.startswith("postgresql"):
        args.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_pre_ping": True,  # Verifica conexion antes de usar
        })

    return args


def create_db_engine(settings: Settings = None, url: str = None) -> Engine:
    """
    Crea el engine para la URL efectiva de la configuracion.

    Args:
        settings: Configuracion (por defecto la instancia global)
        url: URL explicita; tiene prioridad sobre la configuracion
    """
    settings = settings or default_settings
    url = url or settings.effective_database_url
    return create_engine(url, **_create_engine_args(settings, url))
