"""
Punto de entrada principal de la aplicacion FastAPI.
Configura la aplicacion, middlewares, rutas y eventos.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.events import startup_handler, shutdown_handler
from app.api.v1.router import api_router
from app.api.middlewares.error_handler import ErrorHandlerMiddleware
from app.infrastructure.cache.property_cache import PropertyDatasetCache
from app.infrastructure.repositories.csv_property_repository import CsvPropertyRepository
from app.shared.exceptions.base import AppException


def create_application() -> FastAPI:
    """
    Factory para crear y configurar la aplicacion FastAPI.

    Returns:
        FastAPI: Instancia configurada de la aplicacion
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup_handler(app)()
        yield
        await shutdown_handler(app)()

    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Webhook de SureMDM que completa propiedades de dispositivos desde un CSV",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Cache del CSV de propiedades, unico por aplicacion
    repository = CsvPropertyRepository(settings.PROPERTIES_CSV_PATH)
    application.state.property_cache = PropertyDatasetCache(
        repository.load_all,
        retry_failed_load=settings.PROPERTIES_RETRY_FAILED_LOAD,
    )

    # Middleware personalizado para manejo de errores
    application.add_middleware(ErrorHandlerMiddleware)

    # Incluir routers de la API
    application.include_router(api_router, prefix="/api")

    # Manejador global de excepciones personalizadas
    @application.exception_handler(AppException)
    async def app_exception_handler(request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict()
        )

    # Health check endpoint
    @application.get("/health", tags=["Health"])
    async def health_check():
        """Endpoint para verificar el estado de la aplicacion."""
        return {
            "status": "healthy",
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "property_cache": application.state.property_cache.state.value,
            "suremdm_configured": settings.suremdm_configured,
        }

    return application


# Crear instancia de la aplicacion
app = create_application()


if __name__ == "__main__":
    import uvicorn
    from loguru import logger

    # Determinar la URL base de acceso
    if settings.HOST == "0.0.0.0":
        access_host = "localhost"
    else:
        access_host = settings.HOST

    base_url = f"http://{access_host}:{settings.PORT}"

    logger.info("=" * 70)
    logger.info(f"  Webhook:     {base_url}/api/v1/webhooks/suremdm")
    logger.info(f"  Health:      {base_url}/health")
    logger.info(f"  Swagger UI:  {base_url}/docs")
    logger.info("=" * 70)

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
