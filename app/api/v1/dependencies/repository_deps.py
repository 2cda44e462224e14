"""
Dependencias para inyeccion del dataset de propiedades.
"""
from fastapi import Request

from app.infrastructure.cache.property_cache import PropertyDatasetCache


def get_property_cache(request: Request) -> PropertyDatasetCache:
    """
    Dependencia para obtener el cache de propiedades de la aplicacion.

    El cache pertenece a la instancia de FastAPI (app.state) y se comparte
    entre todos los requests del proceso.

    Returns:
        PropertyDatasetCache: Cache de propiedades
    """
    return request.app.state.property_cache
