"""
Utilidades para manejo de fechas y horas.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Retorna la hora actual en UTC, como datetime aware."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Normaliza datetime a UTC (aware).

    Un datetime naive se interpreta como UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_epoch_seconds(dt: datetime) -> int:
    """Convierte un datetime a segundos Unix (entero)."""
    return int(ensure_utc(dt).timestamp())
