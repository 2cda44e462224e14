"""
Middleware para manejo centralizado de errores no controlados.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Captura cualquier excepcion que no sea AppException y responde 500.
    Las AppException las resuelve el exception handler registrado en main.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Procesa la peticion y captura errores.

        Args:
            request: Peticion HTTP
            call_next: Siguiente middleware/handler

        Returns:
            Response: Respuesta HTTP
        """
        try:
            return await call_next(request)
        except Exception as exc:
            logger.opt(exception=exc).error(
                f"Error no manejado en {request.method} {request.url.path}: {exc!r}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "INTERNAL_SERVER_ERROR",
                    "message": f"Error: {exc}",
                    "details": {}
                }
            )
