"""
Cache en memoria del dataset de propiedades.

Motivacion:
- El CSV se lee una sola vez por proceso y se comparte entre requests.
- Varios webhooks pueden llegar a la vez antes de que termine la primera
  carga; todos deben esperar la misma carga, sin lecturas duplicadas.

Caracteristicas:
- Estados EMPTY -> LOADING -> READY
- Una unica tarea de carga compartida por todos los llamadores concurrentes
- Una carga fallida degrada a un dataset vacio (no se propaga el error)
- Sin invalidacion ni recarga en caliente
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Tuple

from loguru import logger

from app.domain.entities.device import PropertyRow
from app.shared.constants.webhook_constants import CacheState


PropertyDataset = Tuple[PropertyRow, ...]


class PropertyDatasetCache:
    """
    Cache del dataset de propiedades con inicializacion unica.

    Implementacion:
    - El loader es sincrono (lectura de archivo); se ejecuta en un thread
      via `asyncio.to_thread` para no bloquear el event loop.
    - La primera llamada crea la tarea de carga; las concurrentes la esperan
      con `asyncio.shield` para que la cancelacion de un request no aborte
      la carga de los demas.
    - Todas las llamadas devuelven la misma tupla (igualdad referencial).
    """

    def __init__(
        self,
        loader: Callable[[], List[PropertyRow]],
        retry_failed_load: bool = False
    ) -> None:
        """
        Args:
            loader: Funcion que lee el dataset completo (p.ej. repo.load_all)
            retry_failed_load: Si True, una carga fallida no queda cacheada
                y el siguiente llamador vuelve a intentar la lectura.
        """
        self._loader = loader
        self._retry_failed_load = retry_failed_load
        self._state = CacheState.EMPTY
        self._dataset: PropertyDataset = ()
        self._pending: Optional[asyncio.Task] = None
        self._load_count = 0

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def load_count(self) -> int:
        """Numero de lecturas del origen realizadas (para monitoreo)."""
        return self._load_count

    async def get_dataset(self) -> PropertyDataset:
        """
        Retorna el dataset, cargandolo la primera vez.

        Returns:
            PropertyDataset: Filas del CSV (vacio si la carga fallo)
        """
        if self._state is CacheState.READY:
            logger.debug("Usando dataset de propiedades en cache")
            return self._dataset

        if self._pending is None:
            logger.info("Cargando dataset de propiedades por primera vez")
            self._state = CacheState.LOADING
            self._pending = asyncio.ensure_future(self._load())
        else:
            logger.info("Esperando carga de dataset en curso")

        return await asyncio.shield(self._pending)

    async def _load(self) -> PropertyDataset:
        """Ejecuta el loader y resuelve el estado final del cache."""
        self._load_count += 1
        try:
            rows = await asyncio.to_thread(self._loader)
        except Exception as e:
            logger.error(f"Error cargando dataset de propiedades: {e}")
            if self._retry_failed_load:
                # Se rearma el cache: el proximo request reintenta
                self._state = CacheState.EMPTY
                self._pending = None
                return ()
            rows = []

        self._dataset = tuple(rows)
        self._state = CacheState.READY
        self._pending = None
        logger.info(f"Dataset de propiedades listo: {len(self._dataset)} filas")
        return self._dataset
