"""
Configuration settings for the inventory CSV import API
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class InventoryApiSettings(BaseSettings):
    """Settings for the backend inventory API and the CSV import defaults"""

    # Backend inventory API (bulk import endpoints)
    inventory_api_base_url: str = Field(default="http://localhost:5000")
    inventory_api_timeout: float = Field(default=30.0, gt=0)

    # Import defaults
    default_asset_category: str = Field(default="Laptop")

    # Export
    csv_export_filename: str = Field(default="virtual_machines.csv")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )


@lru_cache()
def get_inventory_api_settings() -> InventoryApiSettings:
    """Get cached inventory API settings instance"""
    return InventoryApiSettings()
