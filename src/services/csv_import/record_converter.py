"""
Record Converter for CSV Import System.

Converts validated intermediate records into the payload schemas accepted by
the backend bulk-import endpoints. Every conversion is a pure function.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from src.core.settings import get_inventory_api_settings
from src.schemas.asset_schema import AssetSchema, AssetStatus
from src.schemas.component_schema import ComponentSchema
from src.schemas.accessory_schema import AccessorySchema, AccessoryStatus
from src.schemas.virtual_machine_schema import VirtualMachineSchema

from .models import CSVAsset, CSVComponent, CSVAccessory, CSVVirtualMachine
from .tag_generator import generate_asset_tag

logger = logging.getLogger(__name__)

IMPORTED_NOTE = "Imported via CSV"
DEFAULT_VM_STATUS = "Provisioning"

TRUTHY_VALUES = ('true', 'yes', '1')

# Ordine di priorità: il primo termine trovato vince
ACCESSORY_STATUS_KEYWORDS = (
    ('borrowed', AccessoryStatus.BORROWED),
    ('returned', AccessoryStatus.RETURNED),
    ('defective', AccessoryStatus.DEFECTIVE),
)

_LEADING_INTEGER = re.compile(r'\s*([+-]?\d+)')


def parse_quantity(value: Optional[str]) -> int:
    """
    Quantità da testo decimale, default 1.

    Come un parse intero "a prefisso": "12 pcs" → 12. Il testo senza cifre
    iniziali non fa fallire l'import e ricade su 1.
    """
    if not value:
        return 1
    match = _LEADING_INTEGER.match(value)
    if match is None:
        logger.warning(f"Non-numeric quantity '{value}', defaulting to 1")
        return 1
    return int(match.group(1))


def parse_internet_access(value: Optional[str]) -> bool:
    """True solo per "true", "yes" o "1" (case-insensitive, match esatto)"""
    if not value:
        return False
    return value.lower() in TRUTHY_VALUES


def map_accessory_status(value: Optional[str]) -> AccessoryStatus:
    """Mappa lo stato testuale per sottostringa: borrowed > returned > defective, altrimenti AVAILABLE"""
    if not value:
        return AccessoryStatus.AVAILABLE
    lowered = value.lower()
    for keyword, status in ACCESSORY_STATUS_KEYWORDS:
        if keyword in lowered:
            return status
    return AccessoryStatus.AVAILABLE


class RecordConverter:
    """
    Converter record CSV → schema di bulk import.

    Stateless converter - tutti i metodi sono statici.
    """

    @staticmethod
    def to_asset(
        csv_asset: CSVAsset,
        default_category: Optional[str] = None,
        tag_generator: Callable[[Optional[str], str], str] = generate_asset_tag
    ) -> AssetSchema:
        """
        Converte un CSVAsset.

        - asset_tag: generato dalla categoria se assente
        - name: "<categoria o 'Asset'> - <seriale>" se assente
        - description: "Imported from CSV" più il Knox ID se presente
        """
        if default_category is None:
            default_category = get_inventory_api_settings().default_asset_category

        asset_tag = csv_asset.asset_tag or tag_generator(csv_asset.category, csv_asset.serial_number)
        name = csv_asset.name or f"{csv_asset.category or 'Asset'} - {csv_asset.serial_number}"
        description = "Imported from CSV"
        if csv_asset.knox_id:
            description += f". Knox ID: {csv_asset.knox_id}"

        return AssetSchema(
            asset_tag=asset_tag,
            name=name,
            description=description,
            category=csv_asset.category or default_category,
            status=csv_asset.status or AssetStatus.AVAILABLE.value,
            serial_number=csv_asset.serial_number,
            model=csv_asset.model,
            purchase_date=csv_asset.purchase_date,
            manufacturer=csv_asset.manufacturer,
            purchase_cost=csv_asset.purchase_cost,
            location=csv_asset.location,
            knox_id=csv_asset.knox_id,
            ip_address=csv_asset.ip_address,
            mac_address=csv_asset.mac_address,
            os_type=csv_asset.os_type,
            department=csv_asset.department,
        )

    @staticmethod
    def to_component(csv_component: CSVComponent) -> ComponentSchema:
        return ComponentSchema(
            name=csv_component.name,
            category=csv_component.category,
            description=None,
            purchase_date=None,
            purchase_cost=None,
            location=None,
            serial_number=csv_component.serial_number or None,
            model=csv_component.model or None,
            manufacturer=csv_component.manufacturer or None,
            notes=csv_component.notes or IMPORTED_NOTE,
            quantity=parse_quantity(csv_component.quantity),
        )

    @staticmethod
    def to_accessory(csv_accessory: CSVAccessory) -> AccessorySchema:
        return AccessorySchema(
            name=csv_accessory.name,
            category=csv_accessory.category,
            status=map_accessory_status(csv_accessory.status),
            description=None,
            purchase_date=None,
            purchase_cost=None,
            location=None,
            serial_number=csv_accessory.serial_number or None,
            model=csv_accessory.model or None,
            manufacturer=csv_accessory.manufacturer or None,
            notes=csv_accessory.notes or IMPORTED_NOTE,
            quantity=parse_quantity(csv_accessory.quantity),
            assigned_to=None,
        )

    @staticmethod
    def to_virtual_machine(csv_vm: CSVVirtualMachine) -> VirtualMachineSchema:
        """Campi opzionali → stringa vuota, vm_status → "Provisioning", date_deleted → None"""
        return VirtualMachineSchema(
            vm_id=csv_vm.vm_id or "",
            vm_name=csv_vm.vm_name,
            vm_status=csv_vm.vm_status or DEFAULT_VM_STATUS,
            vm_ip=csv_vm.vm_ip or "",
            internet_access=parse_internet_access(csv_vm.internet_access),
            vm_os=csv_vm.vm_os or "",
            vm_os_version=csv_vm.vm_os_version or "",
            hypervisor=csv_vm.hypervisor,
            hostname=csv_vm.hostname or "",
            host_model=csv_vm.host_model or "",
            host_ip=csv_vm.host_ip or "",
            host_os=csv_vm.host_os or "",
            rack=csv_vm.rack or "",
            deployed_by=csv_vm.deployed_by or "",
            user=csv_vm.user or "",
            department=csv_vm.department or "",
            start_date=csv_vm.start_date or "",
            end_date=csv_vm.end_date or "",
            jira_ticket=csv_vm.jira_ticket or "",
            remarks=csv_vm.remarks or "",
            date_deleted=None,
        )

    @staticmethod
    def to_assets(csv_assets: List[CSVAsset], default_category: Optional[str] = None) -> List[AssetSchema]:
        return [RecordConverter.to_asset(asset, default_category) for asset in csv_assets]

    @staticmethod
    def to_components(csv_components: List[CSVComponent]) -> List[ComponentSchema]:
        return [RecordConverter.to_component(component) for component in csv_components]

    @staticmethod
    def to_accessories(csv_accessories: List[CSVAccessory]) -> List[AccessorySchema]:
        return [RecordConverter.to_accessory(accessory) for accessory in csv_accessories]

    @staticmethod
    def to_virtual_machines(csv_vms: List[CSVVirtualMachine]) -> List[VirtualMachineSchema]:
        return [RecordConverter.to_virtual_machine(vm) for vm in csv_vms]
