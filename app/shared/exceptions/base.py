"""
Excepcion base para todas las excepciones personalizadas del webhook.
"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Excepcion base de la aplicacion.
    Todas las excepciones personalizadas deben heredar de esta clase;
    el manejador global las convierte en una respuesta JSON con su status.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Inicializa la excepcion.

        Args:
            message: Mensaje de error descriptivo (se devuelve tal cual al cliente)
            status_code: Codigo de estado HTTP
            error_code: Codigo de error personalizado
            details: Detalles adicionales del error
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Cuerpo JSON de la respuesta de error."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }
