"""
Excepciones relacionadas con la logica de dominio del webhook.

Todas responden 400: son condiciones de "no hay nada que hacer" o payloads
invalidos, no fallos tecnicos.
"""
from typing import Any, Optional

from app.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepcion base para errores de dominio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class InvalidWebhookPayloadException(DomainException):
    """Excepcion cuando el cuerpo del webhook no es JSON valido."""

    def __init__(self, parse_error: str):
        super().__init__(
            message=f"Invalid JSON body. Error: {parse_error}",
            error_code="INVALID_JSON",
            details={"parse_error": parse_error}
        )


class MissingWebhookFieldsException(DomainException):
    """Excepcion cuando faltan EventType o DeviceId en el payload."""

    def __init__(self, missing_fields: Optional[list[str]] = None):
        super().__init__(
            message="Missing required fields (EventType or DeviceId)",
            error_code="MISSING_REQUIRED_FIELDS",
            details={"missing_fields": missing_fields or []}
        )


class DeviceNotFoundException(DomainException):
    """Excepcion cuando SureMDM responde pero no devuelve el dispositivo."""

    def __init__(self, device_id: Any):
        super().__init__(
            message="device not found on suremdm",
            error_code="DEVICE_NOT_FOUND",
            details={"device_id": str(device_id)}
        )


class NoSerialNumberException(DomainException):
    """Excepcion cuando no se pudo resolver el numero de serie del dispositivo."""

    def __init__(self, device_id: Any):
        super().__init__(
            message="No serial number available - cannot lookup properties in CSV",
            error_code="NO_SERIAL_NUMBER",
            details={"device_id": str(device_id)}
        )


class NoMatchingPropertiesException(DomainException):
    """Excepcion cuando el CSV no tiene propiedades para el numero de serie."""

    def __init__(self, serial_number: str):
        super().__init__(
            message="No custom properties found in CSV for this serial number",
            error_code="NO_CUSTOM_PROPERTIES",
            details={"serial_number": serial_number}
        )


class PropertyDatasetError(Exception):
    """
    Error al leer el CSV de propiedades.

    No hereda de AppException: el cache la captura y degrada a un
    dataset vacio, nunca llega al cliente.
    """
