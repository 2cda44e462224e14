"""
Caso de uso principal: procesar un webhook de SureMDM.

Pipeline por request:
1. Asegurar el dataset de propiedades (cache, carga unica)
2. Parsear el cuerpo (vacio -> prueba de conectividad)
3. Validar EventType y DeviceId
4. Obtener el detalle del dispositivo (degradado si SureMDM no responde)
5. Verificar numero de serie
6. Buscar propiedades en el CSV
7. Enviar las propiedades a SureMDM
8. Componer la respuesta
"""
import json
from typing import Any, List, Sequence, Union

from loguru import logger

from app.application.dto.webhook_dto import (
    DeviceDetailsDTO,
    LivenessProbeDTO,
    WebhookResponseDTO,
)
from app.application.services.device_detail_service import DeviceDetailService
from app.application.services.property_lookup import lookup_custom_properties
from app.application.services.property_update_service import PropertyUpdateService
from app.domain.entities.device import DeviceRecord, PropertyRow, WebhookEvent
from app.infrastructure.cache.property_cache import PropertyDatasetCache
from app.shared.exceptions.domain import (
    InvalidWebhookPayloadException,
    NoMatchingPropertiesException,
    NoSerialNumberException,
)
from app.shared.exceptions.external import DeviceProviderUnavailableException
from app.shared.utils.datetime_utils import DateTimeUtils


class WebhookUseCases:
    """
    Orquesta las etapas del webhook.
    Cada etapa recibe la salida de la anterior; los fallos se expresan
    como AppException y el manejador global los convierte en respuesta.
    """

    def __init__(
        self,
        property_cache: PropertyDatasetCache,
        device_service: DeviceDetailService,
        update_service: PropertyUpdateService
    ):
        self.property_cache = property_cache
        self.device_service = device_service
        self.update_service = update_service

    async def process(self, raw_body: Union[bytes, str]) -> Union[LivenessProbeDTO, WebhookResponseDTO]:
        """
        Procesa un webhook completo.

        Args:
            raw_body: Cuerpo crudo del request

        Returns:
            LivenessProbeDTO si el cuerpo esta vacio, WebhookResponseDTO si
            las propiedades se enviaron correctamente.

        Raises:
            DomainException: Payload invalido o nada que actualizar (400)
            PropertyUpdateException: SureMDM rechazo la actualizacion (500)
        """
        dataset = await self.property_cache.get_dataset()

        text = self._decode_body(raw_body)
        if not text.strip():
            logger.info("Cuerpo vacio - prueba de conectividad")
            return LivenessProbeDTO()

        event = self.parse_event(text)
        logger.info(f"Procesando evento '{event.event_type}' para dispositivo {event.device_id}")

        device = await self.resolve_device(event)
        matches = self.match_properties(dataset, event, device)
        edit_response = await self.update_service.submit_updates(event.device_id, matches)

        return self._build_response(event, device, matches, edit_response)

    @staticmethod
    def _decode_body(raw_body: Union[bytes, str]) -> str:
        if isinstance(raw_body, str):
            return raw_body
        try:
            return raw_body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidWebhookPayloadException(str(e)) from e

    @staticmethod
    def parse_event(text: str) -> WebhookEvent:
        """
        Parsea y valida el payload JSON.

        Raises:
            InvalidWebhookPayloadException: JSON mal formado
            MissingWebhookFieldsException: Falta EventType o DeviceId
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"JSON invalido en webhook: {e}")
            raise InvalidWebhookPayloadException(str(e)) from e

        logger.debug(f"Webhook recibido: {payload}")
        return WebhookEvent.from_payload(payload)

    async def resolve_device(self, event: WebhookEvent) -> DeviceRecord:
        """
        Obtiene el detalle del dispositivo.
        Si SureMDM no esta disponible se continua con un registro vacio;
        DeviceNotFoundException se propaga.
        """
        try:
            return await self.device_service.fetch_device(event.device_id, event.event_type)
        except DeviceProviderUnavailableException as e:
            logger.warning(f"{e.message} - se continua con valores por defecto")
            return DeviceRecord()

    @staticmethod
    def match_properties(
        dataset: Sequence[PropertyRow],
        event: WebhookEvent,
        device: DeviceRecord
    ) -> List[PropertyRow]:
        """
        Busca las propiedades del dispositivo en el dataset.

        Raises:
            NoSerialNumberException: El dispositivo no tiene numero de serie
            NoMatchingPropertiesException: El CSV no tiene filas para la serie
        """
        if not device.has_serial_number:
            logger.info("Sin numero de serie para buscar en el CSV")
            raise NoSerialNumberException(event.device_id)

        matches = lookup_custom_properties(dataset, device.serial_number)
        logger.info(f"Encontradas {len(matches)} propiedades para la serie: {device.serial_number}")
        if not matches:
            raise NoMatchingPropertiesException(device.serial_number)
        return matches

    def _build_response(
        self,
        event: WebhookEvent,
        device: DeviceRecord,
        matches: Sequence[PropertyRow],
        edit_response: Any
    ) -> WebhookResponseDTO:
        return WebhookResponseDTO(
            received_event=event.event_type,
            device_id=event.device_id,
            api_url=self.update_service.client.update_properties_url,
            edit_response=edit_response,
            device_details=DeviceDetailsDTO(**device.to_details()),
            custom_properties=[row.as_dict() for row in matches],
            timestamp=DateTimeUtils.to_iso_string(),
        )
