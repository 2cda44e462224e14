"""
Excepciones relacionadas con la API externa de SureMDM.
"""
from typing import Optional

from app.shared.exceptions.base import AppException


class SureMDMApiException(AppException):
    """Excepcion base para errores de integracion con SureMDM."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int = 500,
        error_code: str = "SUREMDM_API_ERROR",
        provider_status: Optional[int] = None
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details={"url": url, "provider_status": provider_status}
        )
        self.url = url
        self.provider_status = provider_status


class DeviceProviderUnavailableException(SureMDMApiException):
    """
    La consulta de detalle del dispositivo fallo (status no exitoso,
    error de transporte o cuerpo ilegible).

    El orquestador la recupera localmente y continua con valores por defecto.
    """

    def __init__(self, url: str, reason: str, provider_status: Optional[int] = None):
        super().__init__(
            message=f"Could not fetch device details: {reason}",
            url=url,
            status_code=502,
            error_code="DEVICE_PROVIDER_UNAVAILABLE",
            provider_status=provider_status
        )


class PropertyUpdateException(SureMDMApiException):
    """Fallo el envio del lote de propiedades a SureMDM. Es fatal para el request."""

    def __init__(self, url: str, reason: str, provider_status: Optional[int] = None):
        super().__init__(
            message=f"SureMDM API error: {reason}",
            url=url,
            status_code=500,
            error_code="PROPERTY_UPDATE_FAILED",
            provider_status=provider_status
        )
