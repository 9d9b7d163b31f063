from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class AssetStatus(str, Enum):
    AVAILABLE = "available"


class AssetSchema(BaseModel):
    """
        Payload di un asset pronto per il bulk import.

        Le chiavi vengono serializzate in camelCase (assetTag, serialNumber, knoxId, ...)
        perché così le attende l'endpoint `/api/assets/import` del backend.

        Attributes:
        - asset_tag (str): Tag inventariale, generato dalla categoria se assente nel CSV.
        - name (str): Nome dell'asset, di default "<categoria o 'Asset'> - <seriale>".
        - description (str): Descrizione sintetizzata all'import (include il Knox ID se presente).
        - category (str): Categoria, di default quella configurata (Laptop).
        - status (str): Stato testuale, di default "available".
        - serial_number (str): Numero di serie, obbligatorio.
    """
    asset_tag: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str
    status: str = Field(default=AssetStatus.AVAILABLE.value)
    serial_number: str = Field(..., min_length=1)
    model: Optional[str] = None
    purchase_date: Optional[str] = None
    manufacturer: Optional[str] = None
    purchase_cost: Optional[str] = None
    location: Optional[str] = None
    knox_id: Optional[str] = None
    ip_address: Optional[str] = None
    mac_address: Optional[str] = None
    os_type: Optional[str] = None
    department: Optional[str] = None

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}
