"""
Busqueda de propiedades personalizadas por numero de serie.
"""
from typing import List, Optional, Sequence

from app.domain.entities.device import PropertyRow


def lookup_custom_properties(
    dataset: Sequence[PropertyRow],
    serial_number: Optional[str]
) -> List[PropertyRow]:
    """
    Filtra las filas cuyo SerialNumber coincide exactamente (sensible a
    mayusculas) con el numero de serie dado. Conserva el orden del dataset.

    Args:
        dataset: Filas del CSV
        serial_number: Numero de serie del dispositivo

    Returns:
        List[PropertyRow]: Filas coincidentes (vacio si no hay serie o dataset)
    """
    if not serial_number or not dataset:
        return []
    return [row for row in dataset if row.serial_number == serial_number]
