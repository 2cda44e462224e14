"""
Cliente para interactuar con la API REST de SureMDM.

Endpoints usados:
- GET  /v2/device/{device_id}       detalle del dispositivo
- PUT  /v2/UpdatePropertiesValue    actualizacion en lote de propiedades

Autenticacion: Basic (usuario:password) + header ApiKey.
Sin reintentos: cada llamada se hace una sola vez.
"""
from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from app.core.config import settings
from app.domain.entities.device import PropertyEdit
from app.shared.exceptions.external import (
    DeviceProviderUnavailableException,
    PropertyUpdateException,
)


class SureMDMClient:
    """
    Cliente HTTP asincrono de SureMDM.

    Los valores no provistos se toman de la configuracion global.
    `transport` permite inyectar un transporte de httpx (p.ej. MockTransport
    en tests).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.suremdm_base_url).rstrip("/")
        self._username = username if username is not None else settings.SUREMDM_API_USERNAME
        self._password = password if password is not None else settings.SUREMDM_API_PASSWORD
        self._api_key = api_key if api_key is not None else settings.SUREMDM_API_KEY
        self._timeout = timeout or settings.SUREMDM_TIMEOUT_SECONDS
        self._transport = transport
        self.last_url: Optional[str] = None

    def device_url(self, device_id: str) -> str:
        return f"{self.base_url}/v2/device/{device_id}"

    @property
    def update_properties_url(self) -> str:
        return f"{self.base_url}/v2/UpdatePropertiesValue"

    def _build_headers(self) -> Dict[str, str]:
        """Headers comunes a todas las llamadas."""
        credentials = f"{self._username}:{self._password}".encode("utf-8")
        return {
            "Authorization": "Basic " + base64.b64encode(credentials).decode("ascii"),
            "ApiKey": self._api_key,
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def get_device(self, device_id: str) -> Dict[str, Any]:
        """
        Obtiene el detalle de un dispositivo.

        Args:
            device_id: ID del dispositivo en SureMDM

        Returns:
            Dict con el cuerpo JSON de la respuesta

        Raises:
            DeviceProviderUnavailableException: Status no exitoso, error de
                transporte o cuerpo que no es JSON.
        """
        url = self.device_url(device_id)
        self.last_url = url
        logger.info(f"Consultando detalle de dispositivo en: {url}")

        try:
            async with self._client() as client:
                response = await client.get(url, headers=self._build_headers())
        except httpx.HTTPError as e:
            raise DeviceProviderUnavailableException(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise DeviceProviderUnavailableException(
                url,
                f"{response.status_code} {response.reason_phrase}",
                provider_status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise DeviceProviderUnavailableException(
                url, f"respuesta no JSON: {e}", provider_status=response.status_code
            ) from e

    async def update_properties_value(self, edits: List[PropertyEdit]) -> Any:
        """
        Envia en una sola llamada todas las ediciones de propiedades.

        Args:
            edits: Ediciones a aplicar (en orden)

        Returns:
            Cuerpo JSON de SureMDM, sin modificar

        Raises:
            PropertyUpdateException: Status no exitoso, error de transporte
                o cuerpo que no es JSON.
        """
        url = self.update_properties_url
        self.last_url = url
        body = [edit.to_payload() for edit in edits]
        logger.info(f"Enviando {len(body)} edicion(es) de propiedades a: {url}")

        try:
            async with self._client() as client:
                response = await client.put(url, headers=self._build_headers(), json=body)
        except httpx.HTTPError as e:
            raise PropertyUpdateException(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise PropertyUpdateException(
                url,
                f"{response.status_code} {response.reason_phrase}",
                provider_status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise PropertyUpdateException(
                url, f"respuesta no JSON: {e}", provider_status=response.status_code
            ) from e
