"""
Endpoint receptor de webhooks de SureMDM.
Enriquece el dispositivo con propiedades del CSV y las envia a SureMDM.
"""
import time
import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.application.dto.webhook_dto import LivenessProbeDTO, WebhookResponseDTO
from app.application.use_cases.webhook_use_cases import WebhookUseCases
from app.api.v1.dependencies.use_case_deps import get_webhook_use_cases
from app.shared.exceptions.base import AppException
from app.shared.utils.audit_logger import audit


router = APIRouter(prefix="/webhooks", tags=["Webhooks"])


@router.api_route(
    "/suremdm",
    methods=["GET", "POST", "PUT"],
    response_model=WebhookResponseDTO,
    summary="Recibir evento de SureMDM"
)
async def receive_suremdm_webhook(
    request: Request,
    use_cases: WebhookUseCases = Depends(get_webhook_use_cases)
):
    """
    Recibe un evento de ciclo de vida de un dispositivo.

    - Cuerpo vacio: 200 en texto plano (prueba de conectividad)
    - JSON invalido o sin EventType/DeviceId: 400
    - Dispositivo inexistente, sin serie o sin propiedades en el CSV: 400
    - Fallo al actualizar propiedades en SureMDM: 500
    """
    request_id = uuid.uuid4().hex
    started = time.perf_counter()

    raw_body = await request.body()
    audit.log_request(request_id, request, len(raw_body))

    try:
        result = await use_cases.process(raw_body)
    except AppException as exc:
        audit.log_response(request_id, request, exc.status_code, _elapsed_ms(started))
        raise
    except Exception:
        # La respuesta 500 la arma ErrorHandlerMiddleware
        audit.log_response(request_id, request, 500, _elapsed_ms(started))
        raise

    audit.log_response(request_id, request, 200, _elapsed_ms(started))
    if isinstance(result, LivenessProbeDTO):
        return PlainTextResponse(result.message, status_code=200)
    return result


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000
