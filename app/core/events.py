"""
Manejadores de eventos de inicio y cierre de la aplicacion.
"""
from typing import Callable
from fastapi import FastAPI
from loguru import logger

from app.core.config import settings
from app.shared.utils.audit_logger import AuditLogger


def startup_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de inicio de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de inicio
    """
    async def startup() -> None:
        """Inicializa recursos al inicio de la aplicacion."""
        try:
            logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
            logger.info(f"Entorno: {settings.ENVIRONMENT}")

            # Validar configuracion critica
            _validate_config()

            # Inicializar auditoria de webhooks
            AuditLogger.initialize()

            # Configurar logging adicional
            logger.add(
                settings.LOG_FILE,
                rotation="500 MB",
                retention="10 days",
                level=settings.LOG_LEVEL
            )

            # Precargar el CSV si se pidio; si no, lo carga el primer webhook
            if settings.PROPERTIES_PRELOAD:
                dataset = await app.state.property_cache.get_dataset()
                logger.info(f"Dataset de propiedades precargado: {len(dataset)} filas")

            logger.success("Aplicacion iniciada correctamente")

        except Exception as e:
            logger.error(f"Error durante startup: {e}")
            logger.exception("Detalle del error:")
            raise

    return startup


def _validate_config() -> None:
    """Valida que la configuracion critica este presente."""
    warnings = []

    if not settings.SUREMDM_API_URL:
        warnings.append("SUREMDM_API_URL no configurada - las llamadas a SureMDM fallaran")
    if not (settings.SUREMDM_API_USERNAME and settings.SUREMDM_API_PASSWORD):
        warnings.append("Credenciales de SureMDM incompletas (SUREMDM_API_USERNAME/SUREMDM_API_PASSWORD)")
    if not settings.SUREMDM_API_KEY:
        warnings.append("SUREMDM_API_KEY no configurada")

    # Mostrar advertencias
    for warning in warnings:
        logger.warning(f"CONFIG: {warning}")


def shutdown_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de cierre de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de cierre
    """
    async def shutdown() -> None:
        """Libera recursos al cerrar la aplicacion."""
        logger.info("Cerrando aplicacion...")
        cache = app.state.property_cache
        logger.info(f"Estado final del cache de propiedades: {cache.state.value} ({cache.load_count} carga(s))")
        logger.success("Aplicacion cerrada correctamente")

    return shutdown
