"""
Constantes del webhook de SureMDM.
Define centinelas de respuesta, mensajes fijos y columnas del CSV.
"""
from enum import Enum


# Centinelas aplicados solo al serializar la respuesta
UNKNOWN_DEVICE_NAME = "Unknown Device"
NOT_AVAILABLE = "N/A"

# Mensajes fijos
LIVENESS_MESSAGE = "Webhook endpoint is working. Send JSON data with EventType and DeviceId."
SUCCESS_MESSAGE = "Webhook received and processed successfully"

# Campos requeridos del payload de SureMDM
EVENT_TYPE_FIELD = "EventType"
DEVICE_ID_FIELD = "DeviceId"

# Columnas requeridas del CSV de propiedades
CSV_SERIAL_NUMBER_COLUMN = "SerialNumber"
CSV_PROPERTY_NAME_COLUMN = "Propertyname"
CSV_VALUE_COLUMN = "Value"
CSV_REQUIRED_COLUMNS = (
    CSV_SERIAL_NUMBER_COLUMN,
    CSV_PROPERTY_NAME_COLUMN,
    CSV_VALUE_COLUMN,
)


class CacheState(str, Enum):
    """Estados del cache de propiedades."""
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
