"""
Test per la configurazione (pydantic-settings)
"""

from src.core.settings import InventoryApiSettings, get_inventory_api_settings


def test_default_settings(monkeypatch):
    for name in ("INVENTORY_API_BASE_URL", "INVENTORY_API_TIMEOUT", "DEFAULT_ASSET_CATEGORY"):
        monkeypatch.delenv(name, raising=False)

    settings = InventoryApiSettings(_env_file=None)

    assert settings.inventory_api_base_url == "http://localhost:5000"
    assert settings.inventory_api_timeout == 30.0
    assert settings.default_asset_category == "Laptop"
    assert settings.csv_export_filename == "virtual_machines.csv"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("INVENTORY_API_BASE_URL", "https://inventory.example.com")
    monkeypatch.setenv("inventory_api_timeout", "5")

    settings = InventoryApiSettings(_env_file=None)

    assert settings.inventory_api_base_url == "https://inventory.example.com"
    assert settings.inventory_api_timeout == 5.0


def test_settings_are_cached():
    assert get_inventory_api_settings() is get_inventory_api_settings()
