"""
Data models for CSV Import System.

Immutable dataclasses for the intermediate records produced by the parser
and for the import result returned to the API.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Dict, Any, Optional


class ImportType(str, Enum):
    """Tipi di import supportati (coincidono con il segmento `/api/{tipo}/import`)"""
    ASSETS = "assets"
    COMPONENTS = "components"
    ACCESSORIES = "accessories"
    VMS = "vms"


@dataclass(frozen=True)
class CSVAsset:
    """
    Riga CSV di un asset dopo il mapping degli header.

    Attributes:
        knox_id: Knox ID del dispositivo (obbligatorio)
        serial_number: Numero di serie (obbligatorio)
        asset_tag: Tag inventariale, generato in conversione se assente
        name: Nome, sintetizzato in conversione se assente
    """
    knox_id: str
    serial_number: str
    asset_tag: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    model: Optional[str] = None
    purchase_date: Optional[str] = None
    manufacturer: Optional[str] = None
    purchase_cost: Optional[str] = None
    location: Optional[str] = None
    ip_address: Optional[str] = None
    mac_address: Optional[str] = None
    os_type: Optional[str] = None
    department: Optional[str] = None


@dataclass(frozen=True)
class CSVComponent:
    """Riga CSV di un componente (name e category obbligatori)"""
    name: str
    category: str
    quantity: Optional[str] = None
    serial_number: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class CSVAccessory:
    """Riga CSV di un accessorio: come il componente più lo stato testuale"""
    name: str
    category: str
    status: Optional[str] = None
    quantity: Optional[str] = None
    serial_number: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class CSVVirtualMachine:
    """
    Riga CSV di una macchina virtuale.

    Attributes:
        vm_id, vm_name, hypervisor: Campi obbligatori
        internet_access: Testo grezzo, convertito in booleano dal converter
    """
    vm_id: str
    vm_name: str
    hypervisor: str
    vm_status: Optional[str] = None
    vm_ip: Optional[str] = None
    internet_access: Optional[str] = None
    vm_os: Optional[str] = None
    vm_os_version: Optional[str] = None
    hostname: Optional[str] = None
    host_model: Optional[str] = None
    host_ip: Optional[str] = None
    host_os: Optional[str] = None
    rack: Optional[str] = None
    deployed_by: Optional[str] = None
    user: Optional[str] = None
    department: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    jira_ticket: Optional[str] = None
    remarks: Optional[str] = None


@dataclass(frozen=True)
class ImportResult:
    """
    Risultato completo operazione import.

    Attributes:
        import_type: Tipo entità importata
        filename: Nome del file caricato
        total_records: Numero record convertiti dal CSV
        submitted: Se i record sono stati inviati al backend
        records: Payload convertiti (serializzati in camelCase)
        response: Corpo JSON restituito dal backend
        parse_time: Tempo parsing + conversione in secondi
        submit_time: Tempo invio in secondi
        started_at: Timestamp inizio operazione
        completed_at: Timestamp fine operazione
    """
    import_type: ImportType
    filename: str
    total_records: int
    submitted: bool
    records: List[Dict[str, Any]] = field(default_factory=list)
    response: Optional[Any] = None
    parse_time: float = 0.0
    submit_time: float = 0.0
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def total_time(self) -> float:
        """Tempo totale operazione"""
        return self.parse_time + self.submit_time

    def to_dict(self) -> Dict[str, Any]:
        """Converte in dizionario per risposta API"""
        return {
            "import_type": self.import_type.value,
            "filename": self.filename,
            "total_records": self.total_records,
            "submitted": self.submitted,
            "records": self.records,
            "response": self.response,
            "parse_time": round(self.parse_time, 3),
            "submit_time": round(self.submit_time, 3),
            "total_time": round(self.total_time, 3),
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None
        }
