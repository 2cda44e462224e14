"""
Entidades de dominio del webhook: evento, dispositivo, filas del CSV
y ediciones de propiedades.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.shared.constants.webhook_constants import (
    CSV_PROPERTY_NAME_COLUMN,
    CSV_SERIAL_NUMBER_COLUMN,
    CSV_VALUE_COLUMN,
    DEVICE_ID_FIELD,
    EVENT_TYPE_FIELD,
    NOT_AVAILABLE,
    UNKNOWN_DEVICE_NAME,
)
from app.shared.exceptions.domain import MissingWebhookFieldsException


@dataclass(frozen=True)
class WebhookEvent:
    """
    Evento recibido desde SureMDM.

    Solo EventType y DeviceId son contractuales; el resto del payload
    se conserva sin interpretar.
    """

    event_type: str
    device_id: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "WebhookEvent":
        """
        Construye el evento validando los campos requeridos.

        Raises:
            MissingWebhookFieldsException: Si falta EventType o DeviceId
                (o si el payload no es un objeto JSON).
        """
        if not isinstance(payload, dict):
            raise MissingWebhookFieldsException([EVENT_TYPE_FIELD, DEVICE_ID_FIELD])

        missing = [
            name for name in (EVENT_TYPE_FIELD, DEVICE_ID_FIELD)
            if not payload.get(name)
        ]
        if missing:
            raise MissingWebhookFieldsException(missing)

        return cls(
            event_type=str(payload[EVENT_TYPE_FIELD]),
            device_id=str(payload[DEVICE_ID_FIELD]),
            payload=payload,
        )


@dataclass(frozen=True)
class DeviceRecord:
    """
    Detalle de un dispositivo segun SureMDM.
    Los campos ausentes quedan en None; los centinelas se aplican en to_details().
    """

    device_name: Optional[str] = None
    imei: Optional[str] = None
    mac_address: Optional[str] = None
    serial_number: Optional[str] = None

    @classmethod
    def from_provider_row(cls, row: Dict[str, Any]) -> "DeviceRecord":
        """Mapea la primera fila de /v2/device/{id} al registro."""
        return cls(
            device_name=row.get("DeviceName") or None,
            imei=row.get("IMEI") or None,
            mac_address=row.get("MacAddress") or None,
            serial_number=row.get("SerialNumber") or None,
        )

    @classmethod
    def deleted(cls, device_id: str) -> "DeviceRecord":
        """Registro de un dispositivo eliminado: nombre anotado, sin serie."""
        return cls(device_name=f"Device {device_id} (Deleted)")

    @property
    def has_serial_number(self) -> bool:
        return bool(self.serial_number)

    def to_details(self) -> Dict[str, str]:
        """Serializa el registro para la respuesta aplicando los centinelas."""
        return {
            "name": self.device_name or UNKNOWN_DEVICE_NAME,
            "imei": self.imei or NOT_AVAILABLE,
            "macAddress": self.mac_address or NOT_AVAILABLE,
            "serialNumber": self.serial_number or NOT_AVAILABLE,
        }


@dataclass(frozen=True)
class PropertyRow:
    """Una fila del CSV de propiedades, con todas sus columnas originales."""

    serial_number: str
    property_name: str
    value: str
    columns: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_csv_row(cls, row: Dict[str, str]) -> "PropertyRow":
        return cls(
            serial_number=row[CSV_SERIAL_NUMBER_COLUMN],
            property_name=row[CSV_PROPERTY_NAME_COLUMN],
            value=row[CSV_VALUE_COLUMN],
            columns=dict(row),
        )

    def as_dict(self) -> Dict[str, str]:
        """Fila tal como venia en el CSV."""
        if self.columns:
            return dict(self.columns)
        return {
            CSV_SERIAL_NUMBER_COLUMN: self.serial_number,
            CSV_PROPERTY_NAME_COLUMN: self.property_name,
            CSV_VALUE_COLUMN: self.value,
        }


@dataclass(frozen=True)
class PropertyEdit:
    """Instruccion para fijar una propiedad personalizada de un dispositivo."""

    device_id: str
    property_key: str
    property_value: str
    # Sin semantica de renombrado: siempre vacio
    existing_key: str = ""

    def to_payload(self) -> Dict[str, str]:
        """Formato esperado por PUT /v2/UpdatePropertiesValue."""
        return {
            "_id": self.device_id,
            "CustomPropertiesKey": self.property_key,
            "CustomAttributeExistingKey": self.existing_key,
            "CustomPropertiesValue": self.property_value,
        }
