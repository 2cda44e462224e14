"""
Servicio de envio de propiedades personalizadas a SureMDM.
"""
from typing import Any, List, Sequence

from loguru import logger

from app.domain.entities.device import PropertyEdit, PropertyRow
from app.infrastructure.external.suremdm.suremdm_client import SureMDMClient


def build_property_edits(device_id: str, matches: Sequence[PropertyRow]) -> List[PropertyEdit]:
    """Una edicion por fila, en orden, todas con el mismo device_id."""
    return [
        PropertyEdit(
            device_id=device_id,
            property_key=row.property_name,
            property_value=row.value,
        )
        for row in matches
    ]


class PropertyUpdateService:
    """Construye el lote de ediciones y lo envia en una sola llamada."""

    def __init__(self, client: SureMDMClient):
        self.client = client

    async def submit_updates(self, device_id: str, matches: Sequence[PropertyRow]) -> Any:
        """
        Envia las propiedades coincidentes al dispositivo.

        El llamador garantiza que `matches` no esta vacio.

        Returns:
            Respuesta de SureMDM sin modificar

        Raises:
            PropertyUpdateException: Si SureMDM rechaza o no recibe el lote
        """
        edits = build_property_edits(device_id, matches)
        logger.info(f"Preparadas {len(edits)} actualizaciones de propiedades para el dispositivo {device_id}")

        result = await self.client.update_properties_value(edits)
        logger.info(f"Respuesta de SureMDM: {result}")
        return result
