"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .webhook_dto import DeviceDetailsDTO, LivenessProbeDTO, WebhookResponseDTO

__all__ = [
    "DeviceDetailsDTO",
    "LivenessProbeDTO",
    "WebhookResponseDTO",
]
