"""
Integracion con la API REST de SureMDM.
"""
from .suremdm_client import SureMDMClient

__all__ = ["SureMDMClient"]
