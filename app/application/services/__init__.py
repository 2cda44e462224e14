"""
Servicios de aplicacion.

Contiene la logica reutilizable por el caso de uso del webhook:
detalle de dispositivo, busqueda en el CSV y envio de propiedades.
"""
from app.application.services.device_detail_service import DeviceDetailService
from app.application.services.property_lookup import lookup_custom_properties
from app.application.services.property_update_service import (
    PropertyUpdateService,
    build_property_edits,
)

__all__ = [
    "DeviceDetailService",
    "lookup_custom_properties",
    "PropertyUpdateService",
    "build_property_edits",
]
