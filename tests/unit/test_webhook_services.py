"""
Tests unitarios para DeviceDetailService y PropertyUpdateService.
"""
import pytest

from app.application.services.device_detail_service import DeviceDetailService
from app.application.services.property_update_service import (
    PropertyUpdateService,
    build_property_edits,
)
from app.core.config import settings
from app.shared.exceptions.domain import DeviceNotFoundException
from app.shared.exceptions.external import DeviceProviderUnavailableException


class TestDeviceDetailService:
    """Tests para la obtencion del detalle del dispositivo."""

    @pytest.mark.asyncio
    async def test_delete_event_skips_remote_call(self, fake_suremdm, suremdm_client) -> None:
        service = DeviceDetailService(suremdm_client, delete_event_type="Device Deletion")

        record = await service.fetch_device("abc123", "Device Deletion")

        assert fake_suremdm.requests == []
        assert record.device_name == "Device abc123 (Deleted)"
        assert record.serial_number is None

    @pytest.mark.asyncio
    async def test_delete_event_match_is_exact(self, fake_suremdm, suremdm_client) -> None:
        fake_suremdm.set_device(SerialNumber="SN1")
        service = DeviceDetailService(suremdm_client, delete_event_type="Device Deletion")

        record = await service.fetch_device("abc123", "device deletion")

        assert len(fake_suremdm.device_requests) == 1
        assert record.serial_number == "SN1"

    @pytest.mark.asyncio
    async def test_first_row_is_used(self, fake_suremdm, suremdm_client) -> None:
        fake_suremdm.device_body = {"data": {"rows": [
            {"DeviceName": "First", "SerialNumber": "SN1"},
            {"DeviceName": "Second", "SerialNumber": "SN2"},
        ]}}
        service = DeviceDetailService(suremdm_client)

        record = await service.fetch_device("abc123", "Device Enrolled")

        assert record.device_name == "First"
        assert record.serial_number == "SN1"
        assert record.imei is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"data": {"rows": []}},
        {"data": {}},
        {},
        None,
    ])
    async def test_no_rows_raises_not_found(self, fake_suremdm, suremdm_client, body) -> None:
        fake_suremdm.device_body = body
        service = DeviceDetailService(suremdm_client)

        with pytest.raises(DeviceNotFoundException) as exc_info:
            await service.fetch_device("abc123", "Device Enrolled")

        assert exc_info.value.message == "device not found on suremdm"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"data": {"rows": [None]}},
        {"data": {"rows": "abc"}},
        {"data": [{"SerialNumber": "SN1"}]},
        [{"SerialNumber": "SN1"}],
        "text",
    ])
    async def test_unexpected_shape_raises_provider_unavailable(self, fake_suremdm, suremdm_client, body) -> None:
        fake_suremdm.device_body = body
        service = DeviceDetailService(suremdm_client)

        with pytest.raises(DeviceProviderUnavailableException) as exc_info:
            await service.fetch_device("abc123", "Device Enrolled")

        assert exc_info.value.url.endswith("/v2/device/abc123")

    def test_delete_event_type_defaults_to_settings(self, suremdm_client) -> None:
        service = DeviceDetailService(suremdm_client)

        assert service.delete_event_type == settings.SUREMDM_DELETE_EVENT_TYPE
        assert service.is_delete_event(settings.SUREMDM_DELETE_EVENT_TYPE)

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, fake_suremdm, suremdm_client) -> None:
        fake_suremdm.device_status = 503
        service = DeviceDetailService(suremdm_client)

        with pytest.raises(DeviceProviderUnavailableException):
            await service.fetch_device("abc123", "Device Enrolled")


class TestPropertyUpdateService:
    """Tests para el envio de propiedades."""

    def test_build_edits_preserves_order_and_device_id(self, property_rows) -> None:
        edits = build_property_edits("abc123", property_rows)

        assert [e.property_key for e in edits] == ["Location", "Location", "CostCenter"]
        assert [e.property_value for e in edits] == ["Warehouse A", "Store 12", "CC-100"]
        assert {e.device_id for e in edits} == {"abc123"}
        assert {e.existing_key for e in edits} == {""}

    @pytest.mark.asyncio
    async def test_submit_sends_single_batch(self, fake_suremdm, suremdm_client, property_rows) -> None:
        service = PropertyUpdateService(suremdm_client)

        result = await service.submit_updates("abc123", property_rows[:1])

        assert len(fake_suremdm.update_requests) == 1
        assert fake_suremdm.update_payload() == [{
            "_id": "abc123",
            "CustomPropertiesKey": "Location",
            "CustomAttributeExistingKey": "",
            "CustomPropertiesValue": "Warehouse A",
        }]
        assert result == fake_suremdm.update_body
