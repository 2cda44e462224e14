"""
Interfaz del repositorio de propiedades personalizadas.
Define el contrato que debe cumplir cualquier implementacion.
"""
from abc import ABC, abstractmethod
from typing import List

from app.domain.entities.device import PropertyRow


class IPropertyRepository(ABC):
    """
    Interfaz del repositorio de propiedades.
    La lectura es sincrona y completa: el cache decide cuando invocarla.
    """

    @abstractmethod
    def load_all(self) -> List[PropertyRow]:
        """
        Lee todas las filas del origen de datos.

        Returns:
            List[PropertyRow]: Filas en el orden original

        Raises:
            PropertyDatasetError: Si el origen no existe o esta mal formado
        """
        pass
