"""
Entidades del dominio.
"""
from app.domain.entities.device import (
    DeviceRecord,
    PropertyEdit,
    PropertyRow,
    WebhookEvent,
)

__all__ = [
    "DeviceRecord",
    "PropertyEdit",
    "PropertyRow",
    "WebhookEvent",
]
