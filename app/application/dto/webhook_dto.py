"""
DTOs relacionados con el webhook de SureMDM.

Los nombres de campo en JSON (alias) son los que ya consumen los
integradores del webhook; en Python se usan en snake_case.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.shared.constants.webhook_constants import LIVENESS_MESSAGE, SUCCESS_MESSAGE


class DeviceDetailsDTO(BaseModel):
    """Detalle del dispositivo con centinelas ya aplicados."""

    name: str
    imei: str
    mac_address: str = Field(..., alias="macAddress")
    serial_number: str = Field(..., alias="serialNumber")

    class Config:
        """Configuracion de Pydantic."""
        populate_by_name = True


class WebhookResponseDTO(BaseModel):
    """DTO de respuesta de un webhook procesado correctamente."""

    message: str = Field(default=SUCCESS_MESSAGE)
    received_event: str = Field(..., alias="receivedEvent")
    device_id: str = Field(..., alias="deviceId")
    api_url: Optional[str] = Field(None, alias="apiUrl")
    edit_response: Any = Field(None, alias="editResponse")
    device_details: DeviceDetailsDTO = Field(..., alias="deviceDetails")
    custom_properties: List[Dict[str, Any]] = Field(default_factory=list, alias="customProperties")
    timestamp: str

    class Config:
        """Configuracion de Pydantic."""
        populate_by_name = True


class LivenessProbeDTO(BaseModel):
    """Resultado de un request con cuerpo vacio (prueba de conectividad)."""

    message: str = Field(default=LIVENESS_MESSAGE)
