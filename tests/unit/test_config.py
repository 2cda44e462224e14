"""
Tests unitarios para Settings.
"""
from app.core.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("SUREMDM_API_URL", "SUREMDM_API_USERNAME", "SUREMDM_API_PASSWORD", "SUREMDM_API_KEY"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)

    assert config.SUREMDM_DELETE_EVENT_TYPE == "Device Deletion"
    assert config.PROPERTIES_CSV_PATH == "data/propExport.csv"
    assert config.PROPERTIES_RETRY_FAILED_LOAD is False
    assert config.suremdm_configured is False


def test_reads_suremdm_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUREMDM_API_URL", "https://suremdm.example.com/api/")
    monkeypatch.setenv("SUREMDM_API_USERNAME", "user")
    monkeypatch.setenv("SUREMDM_API_PASSWORD", "secret")
    monkeypatch.setenv("SUREMDM_API_KEY", "key")

    config = Settings(_env_file=None)

    assert config.suremdm_configured is True
    assert config.suremdm_base_url == "https://suremdm.example.com/api"
