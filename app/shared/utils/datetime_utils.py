"""
Utilidades para manejo de fechas y horas.
"""
from datetime import datetime, timezone
from typing import Optional


class DateTimeUtils:
    """Clase de utilidades para operaciones con fechas y horas."""

    @staticmethod
    def now_utc() -> datetime:
        """
        Obtiene la fecha y hora actual en UTC.

        Returns:
            datetime: Fecha y hora actual en UTC
        """
        return datetime.now(timezone.utc)

    @staticmethod
    def to_iso_string(dt: Optional[datetime] = None) -> str:
        """
        Convierte un datetime a ISO 8601 en UTC con milisegundos y sufijo 'Z'
        (p.ej. 2024-05-01T12:30:00.123Z).

        Args:
            dt: Objeto datetime (por defecto, ahora)

        Returns:
            str: Fecha en formato ISO 8601
        """
        dt = (dt or DateTimeUtils.now_utc()).astimezone(timezone.utc)
        return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
