from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ComponentSchema(BaseModel):
    """
        Payload di un componente pronto per il bulk import.

        Tutti i campi nullable sono sempre presenti nel payload (valore null),
        non vengono mai omessi.
    """
    name: str
    category: str
    description: Optional[str] = None
    purchase_date: Optional[str] = None
    purchase_cost: Optional[str] = None
    location: Optional[str] = None
    serial_number: Optional[str] = None
    model: Optional[str] = None
    manufacturer: Optional[str] = None
    notes: Optional[str] = None
    quantity: int = 1

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}
