"""
Repositorio de propiedades respaldado por un archivo CSV.

Formato esperado (export de propiedades):
    SerialNumber,Propertyname,Value[,otras columnas...]

Las columnas adicionales se conservan en la fila y se devuelven en la respuesta.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from app.core.config import settings
from app.domain.entities.device import PropertyRow
from app.domain.repositories.property_repository import IPropertyRepository
from app.shared.constants.webhook_constants import CSV_REQUIRED_COLUMNS
from app.shared.exceptions.domain import PropertyDatasetError


class CsvPropertyRepository(IPropertyRepository):
    """Lee el CSV completo y lo convierte en PropertyRow."""

    def __init__(self, csv_path: Optional[Union[str, Path]] = None) -> None:
        self.csv_path = Path(csv_path or settings.PROPERTIES_CSV_PATH)

    def load_all(self) -> List[PropertyRow]:
        if not self.csv_path.is_file():
            raise PropertyDatasetError(f"CSV de propiedades no encontrado: {self.csv_path}")

        rows: List[PropertyRow] = []
        try:
            # utf-8-sig tolera el BOM de los exports de Excel
            with self.csv_path.open(newline="", encoding="utf-8-sig") as handle:
                reader = csv.DictReader(handle)
                self._validate_header(reader.fieldnames)

                for line_number, raw in enumerate(reader, start=2):
                    if None in raw:
                        raise PropertyDatasetError(
                            f"Fila {line_number} con columnas de mas en {self.csv_path}"
                        )
                    if any(raw.get(column) is None for column in CSV_REQUIRED_COLUMNS):
                        raise PropertyDatasetError(
                            f"Fila {line_number} incompleta en {self.csv_path}"
                        )
                    rows.append(PropertyRow.from_csv_row(raw))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise PropertyDatasetError(f"Error leyendo {self.csv_path}: {e}") from e

        logger.info(f"CSV de propiedades cargado: {len(rows)} filas ({self.csv_path})")
        return rows

    def _validate_header(self, fieldnames: Optional[List[str]]) -> None:
        """Verifica que el encabezado tenga las columnas requeridas."""
        missing = [c for c in CSV_REQUIRED_COLUMNS if c not in (fieldnames or [])]
        if missing:
            raise PropertyDatasetError(
                f"Columnas requeridas ausentes en {self.csv_path}: {', '.join(missing)}"
            )
