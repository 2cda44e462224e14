"""
Casos de uso de la aplicacion.
"""
from .webhook_use_cases import WebhookUseCases

__all__ = ["WebhookUseCases"]
