"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends

from app.application.services.device_detail_service import DeviceDetailService
from app.application.services.property_update_service import PropertyUpdateService
from app.application.use_cases.webhook_use_cases import WebhookUseCases
from app.api.v1.dependencies.repository_deps import get_property_cache
from app.infrastructure.cache.property_cache import PropertyDatasetCache
from app.infrastructure.external.suremdm.suremdm_client import SureMDMClient


def get_suremdm_client() -> SureMDMClient:
    """
    Dependencia para obtener un cliente de SureMDM configurado desde settings.

    Returns:
        SureMDMClient: Cliente nuevo por request
    """
    return SureMDMClient()


def get_webhook_use_cases(
    property_cache: PropertyDatasetCache = Depends(get_property_cache),
    client: SureMDMClient = Depends(get_suremdm_client)
) -> WebhookUseCases:
    """
    Dependencia para obtener los casos de uso del webhook.

    Args:
        property_cache: Cache compartido del CSV de propiedades
        client: Cliente de SureMDM

    Returns:
        WebhookUseCases: Instancia de casos de uso del webhook
    """
    return WebhookUseCases(
        property_cache=property_cache,
        device_service=DeviceDetailService(client),
        update_service=PropertyUpdateService(client),
    )
