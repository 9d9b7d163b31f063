from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class VirtualMachineSchema(BaseModel):
    """
        Payload di una macchina virtuale.

        Attributes:
            vm_id, vm_name, hypervisor: Identificativi obbligatori.
            vm_status: Stato della VM, "Provisioning" se non indicato nel CSV.
            internet_access: Flag booleano derivato dal testo del CSV.
            date_deleted: Sempre null all'import.

        Tutti gli altri campi testuali valgono stringa vuota se assenti.
    """
    # VM identification
    vm_id: str
    vm_name: str
    vm_status: str = "Provisioning"
    vm_ip: str = ""
    internet_access: bool = False
    vm_os: str = ""
    vm_os_version: str = ""
    # Host details
    hypervisor: str
    hostname: str = ""
    host_model: str = ""
    host_ip: str = ""
    host_os: str = ""
    rack: str = ""
    # Usage and tracking
    deployed_by: str = ""
    user: str = ""
    department: str = ""
    start_date: str = ""
    end_date: str = ""
    jira_ticket: str = ""
    remarks: str = ""
    date_deleted: Optional[str] = None

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}


class VirtualMachineResponseSchema(VirtualMachineSchema):
    id: Optional[int] = None
