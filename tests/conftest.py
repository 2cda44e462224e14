"""
Configuracion de fixtures para pytest.

Provee:
- Filas de propiedades y un CSV de ejemplo en un directorio temporal
- Un SureMDM falso montado sobre httpx.MockTransport
- Un cliente de SureMDM que habla con ese falso
"""
import json
from pathlib import Path
from typing import Any, Dict, List

import httpx
import pytest

from app.domain.entities.device import PropertyRow
from app.infrastructure.external.suremdm.suremdm_client import SureMDMClient


SUREMDM_BASE_URL = "https://suremdm.test/api"


def _json_response(status_code: int, body: Any) -> httpx.Response:
    """Respuesta JSON literal: None se envia como null, no como cuerpo vacio."""
    return httpx.Response(
        status_code,
        content=json.dumps(body),
        headers={"Content-Type": "application/json"},
    )


class FakeSureMDM:
    """
    Simula los dos endpoints de SureMDM y registra los requests recibidos.
    """

    def __init__(self) -> None:
        self.device_status = 200
        self.device_body: Any = {"data": {"rows": []}}
        self.update_status = 200
        self.update_body: Any = {"status": True, "message": "Properties updated"}
        self.requests: List[httpx.Request] = []

    def set_device(self, **fields: Any) -> None:
        """Configura la fila devuelta por GET /v2/device/{id}."""
        self.device_body = {"data": {"rows": [fields]}}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET" and "/v2/device/" in request.url.path:
            if self.device_status != 200:
                return httpx.Response(self.device_status)
            return _json_response(200, self.device_body)
        if request.method == "PUT" and request.url.path.endswith("/v2/UpdatePropertiesValue"):
            return _json_response(self.update_status, self.update_body)
        return httpx.Response(404)

    @property
    def device_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    @property
    def update_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "PUT"]

    def update_payload(self, index: int = 0) -> List[Dict[str, str]]:
        """Cuerpo JSON enviado en el PUT numero `index`."""
        return json.loads(self.update_requests[index].content)


@pytest.fixture
def fake_suremdm() -> FakeSureMDM:
    return FakeSureMDM()


@pytest.fixture
def suremdm_client(fake_suremdm: FakeSureMDM) -> SureMDMClient:
    """Cliente de SureMDM conectado al falso."""
    return SureMDMClient(
        SUREMDM_BASE_URL,
        "api-user",
        "api-pass",
        "api-key-123",
        transport=httpx.MockTransport(fake_suremdm.handler),
    )


@pytest.fixture
def property_rows() -> List[PropertyRow]:
    """Dataset con dos propiedades para SN1 y una para SN2."""
    return [
        PropertyRow("SN1", "Location", "Warehouse A"),
        PropertyRow("SN2", "Location", "Store 12"),
        PropertyRow("SN1", "CostCenter", "CC-100"),
    ]


@pytest.fixture
def properties_csv(tmp_path: Path) -> Path:
    """CSV de propiedades de ejemplo."""
    path = tmp_path / "propExport.csv"
    path.write_text(
        "SerialNumber,Propertyname,Value\n"
        "SN1,Location,Warehouse A\n"
        "SN2,Location,Store 12\n"
        "SN1,CostCenter,CC-100\n",
        encoding="utf-8",
    )
    return path
