from enum import Enum
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class AccessoryStatus(str, Enum):
    AVAILABLE = "available"
    BORROWED = "borrowed"
    RETURNED = "returned"
    DEFECTIVE = "defective"


class AccessorySchema(BaseModel):
    """
        Payload di un accessorio pronto per il bulk import.

        Stessa struttura del componente più lo stato (vocabolario chiuso
        AccessoryStatus) e l'assegnatario, sempre null all'import.
    """
    name: str
    category: str
    status: AccessoryStatus = AccessoryStatus.AVAILABLE
    description: Optional[str] = None
    purchase_date: Optional[str] = None
    purchase_cost: Optional[str] = None
    location: Optional[str] = None
    serial_number: Optional[str] = None
    model: Optional[str] = None
    manufacturer: Optional[str] = None
    notes: Optional[str] = None
    quantity: int = 1
    assigned_to: Optional[int] = None

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}
