"""
AuditLogger - Registro de auditoria de los webhooks recibidos.

Escribe un archivo diario con una linea por request y otra por response:
- REQUEST: metodo, path, IP de origen, host, content-type, user-agent, tamano
- RESPONSE: status y duracion

Los mensajes se emiten siempre con `context="webhook"`; el archivo solo se
agrega al llamar initialize() (en el startup de la aplicacion).
"""
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import Request
from loguru import logger

from app.core.config import settings


class AuditLogger:
    """
    Gestor del log de auditoria de webhooks.

    Uso:
        # Al inicio de la app
        AuditLogger.initialize()

        # En el endpoint
        AuditLogger.log_request(request_id, request, body_length)
        # ... procesar ...
        AuditLogger.log_response(request_id, request, 200, duration_ms)
    """

    FILE_TIMESTAMP_FORMAT = "%Y-%m-%d"

    _initialized: bool = False
    _log_dir: Optional[Path] = None

    @classmethod
    def initialize(cls, log_dir: Optional[str] = None) -> None:
        """
        Crea la carpeta de auditoria y agrega el sink diario.
        Debe llamarse al inicio de la aplicacion.
        """
        if cls._initialized:
            return

        cls._log_dir = Path(log_dir or settings.AUDIT_LOG_DIR)
        cls._log_dir.mkdir(parents=True, exist_ok=True)

        today = datetime.now().strftime(cls.FILE_TIMESTAMP_FORMAT)
        logger.add(
            str(cls._log_dir / f"webhook_{today}.log"),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}",
            filter=lambda record: record["extra"].get("context") == "webhook",
            rotation="1 day",
            retention="30 days",
            level="DEBUG"
        )

        cls._initialized = True
        logger.info("AuditLogger inicializado")

    @staticmethod
    def client_ip(request: Request) -> str:
        """IP de origen: header de Netlify, luego X-Forwarded-For, luego el socket."""
        ip = request.headers.get("x-nf-client-connection-ip")
        if ip:
            return ip
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    @classmethod
    def log_request(cls, request_id: str, request: Request, body_length: int) -> None:
        """
        Registra un webhook entrante.

        Args:
            request_id: ID generado para el request
            request: Request de FastAPI
            body_length: Tamano del cuerpo en bytes
        """
        audit_logger = logger.bind(context="webhook", request_id=request_id)
        audit_logger.info(
            f"[{request_id[:8]}] REQUEST {request.method} {request.url.path} "
            f"ip={cls.client_ip(request)} host={request.headers.get('host')} "
            f"content_type={request.headers.get('content-type')} "
            f"user_agent={request.headers.get('user-agent')} "
            f"body_length={body_length}"
        )

    @classmethod
    def log_response(
        cls,
        request_id: str,
        request: Request,
        status_code: int,
        duration_ms: Optional[float] = None
    ) -> None:
        """
        Registra la respuesta de un webhook.
        El nivel depende del status: info < 400 <= warning < 500 <= error.
        """
        log_level = "info" if status_code < 400 else "warning" if status_code < 500 else "error"
        audit_logger = logger.bind(context="webhook", request_id=request_id)

        message = f"[{request_id[:8]}] RESPONSE {status_code} {request.method} {request.url.path}"
        if duration_ms is not None:
            message += f" ({duration_ms:.1f}ms)"
        getattr(audit_logger, log_level)(message)


# Alias para uso mas simple
audit = AuditLogger
