"""
CLI: valida el CSV de propiedades antes de desplegarlo.

Lee el archivo con el mismo repositorio que usa el webhook y muestra
cuantas propiedades hay por numero de serie.

Ejecucion:
  python scripts/check_properties_csv.py
  python scripts/check_properties_csv.py --path data/propExport.csv
  python scripts/check_properties_csv.py --serial SN123
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

from loguru import logger

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from app.application.services.property_lookup import lookup_custom_properties
from app.core.config import settings
from app.infrastructure.repositories.csv_property_repository import CsvPropertyRepository
from app.shared.exceptions.domain import PropertyDatasetError


def main() -> int:
    parser = argparse.ArgumentParser(description="Valida el CSV de propiedades de SureMDM")
    parser.add_argument("--path", default=settings.PROPERTIES_CSV_PATH, help="Ruta del CSV")
    parser.add_argument("--serial", default=None, help="Muestra las propiedades de un numero de serie")
    args = parser.parse_args()

    try:
        rows = CsvPropertyRepository(args.path).load_all()
    except PropertyDatasetError as e:
        logger.error(f"CSV invalido: {e}")
        return 1

    per_serial = Counter(row.serial_number for row in rows)
    logger.info(f"Filas: {len(rows)} | Numeros de serie distintos: {len(per_serial)}")

    empty_serials = per_serial.get("", 0)
    if empty_serials:
        logger.warning(f"{empty_serials} fila(s) sin SerialNumber: nunca coincidiran")

    if args.serial:
        matches = lookup_custom_properties(rows, args.serial)
        if not matches:
            logger.warning(f"Sin propiedades para la serie {args.serial}")
            return 1
        for row in matches:
            logger.info(f"  {row.property_name} = {row.value}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
