"""
Servicio de obtencion del detalle de un dispositivo en SureMDM.
"""
from typing import Any, List, Optional

from loguru import logger

from app.core.config import settings
from app.domain.entities.device import DeviceRecord
from app.infrastructure.external.suremdm.suremdm_client import SureMDMClient
from app.shared.exceptions.domain import DeviceNotFoundException
from app.shared.exceptions.external import DeviceProviderUnavailableException


class DeviceDetailService:
    """
    Resuelve el DeviceRecord de un evento.

    - Eventos de eliminacion: no consulta SureMDM, devuelve un registro
      anotado como eliminado y sin numero de serie.
    - SureMDM responde sin filas: el dispositivo no existe (DeviceNotFoundException).
    - Respuesta con forma inesperada o status no exitoso: propaga DeviceProviderUnavailableException para que
      el orquestador decida degradar.
    """

    def __init__(self, client: SureMDMClient, delete_event_type: Optional[str] = None):
        self.client = client
        self.delete_event_type = delete_event_type or settings.SUREMDM_DELETE_EVENT_TYPE

    def is_delete_event(self, event_type: str) -> bool:
        return event_type == self.delete_event_type

    async def fetch_device(self, device_id: str, event_type: str) -> DeviceRecord:
        """
        Obtiene y normaliza el detalle del dispositivo.

        Args:
            device_id: ID del dispositivo
            event_type: Tipo de evento recibido

        Returns:
            DeviceRecord: Registro normalizado (campos ausentes en None)

        Raises:
            DeviceNotFoundException: SureMDM no devolvio filas
            DeviceProviderUnavailableException: SureMDM no respondio con exito
                o la respuesta no tiene la forma esperada
        """
        if self.is_delete_event(event_type):
            logger.info("Evento de eliminacion detectado - se omite la consulta de detalle")
            return DeviceRecord.deleted(device_id)

        device_data = await self.client.get_device(device_id)
        logger.debug(f"Detalle recibido de SureMDM: {device_data}")

        rows = self._extract_rows(device_id, device_data)
        if not rows:
            logger.warning(f"Dispositivo {device_id} no encontrado en SureMDM")
            raise DeviceNotFoundException(device_id)

        if not isinstance(rows[0], dict):
            raise DeviceProviderUnavailableException(
                self.client.device_url(device_id), "fila de dispositivo con formato inesperado"
            )

        record = DeviceRecord.from_provider_row(rows[0])
        logger.info(f"Detalle de dispositivo obtenido: {record.device_name} (serie: {record.serial_number})")
        return record

    def _extract_rows(self, device_id: str, device_data: Any) -> List[Any]:
        """
        Extrae data.rows de la respuesta de SureMDM.

        Niveles ausentes o nulos equivalen a "sin filas"; niveles presentes
        con un tipo distinto al esperado se tratan como respuesta invalida.
        """
        url = self.client.device_url(device_id)
        if device_data is None:
            return []
        if not isinstance(device_data, dict):
            raise DeviceProviderUnavailableException(url, "respuesta con formato inesperado")

        data = device_data.get("data")
        if data is None:
            return []
        if not isinstance(data, dict):
            raise DeviceProviderUnavailableException(url, "campo 'data' con formato inesperado")

        rows = data.get("rows")
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise DeviceProviderUnavailableException(url, "campo 'rows' con formato inesperado")
        return rows
