"""
Header alias tables for CSV Import System.

Every table maps a lower-cased header spelling to the canonical field of the
intermediate record. Headers not listed are ignored by the mapper.
"""
from typing import Dict, List

from .models import ImportType


ASSET_ALIASES: Dict[str, str] = {
    'knoxid': 'knox_id',
    'knox id': 'knox_id',
    'knox_id': 'knox_id',
    'serialnumber': 'serial_number',
    'serial number': 'serial_number',
    'serial_number': 'serial_number',
    'assettag': 'asset_tag',
    'asset tag': 'asset_tag',
    'asset_tag': 'asset_tag',
    'ipaddress': 'ip_address',
    'ip address': 'ip_address',
    'ip_address': 'ip_address',
    'macaddress': 'mac_address',
    'mac address': 'mac_address',
    'mac_address': 'mac_address',
    'ostype': 'os_type',
    'os type': 'os_type',
    'os_type': 'os_type',
    'name': 'name',
    'category': 'category',
    'status': 'status',
    'model': 'model',
    'purchasedate': 'purchase_date',
    'purchase date': 'purchase_date',
    'purchase_date': 'purchase_date',
    'manufacturer': 'manufacturer',
    'purchasecost': 'purchase_cost',
    'purchase cost': 'purchase_cost',
    'purchase_cost': 'purchase_cost',
    'location': 'location',
    'department': 'department',
}

COMPONENT_ALIASES: Dict[str, str] = {
    'name': 'name',
    'category': 'category',
    'quantity': 'quantity',
    'serialnumber': 'serial_number',
    'serial number': 'serial_number',
    'serial_number': 'serial_number',
    'manufacturer': 'manufacturer',
    'model': 'model',
    'notes': 'notes',
}

ACCESSORY_ALIASES: Dict[str, str] = {
    **COMPONENT_ALIASES,
    'status': 'status',
}

VM_ALIASES: Dict[str, str] = {
    # VM identification
    'vmid': 'vm_id',
    'vm_id': 'vm_id',
    'vm id': 'vm_id',
    'vmname': 'vm_name',
    'vm_name': 'vm_name',
    'vm name': 'vm_name',
    'name': 'vm_name',
    'vmstatus': 'vm_status',
    'vm_status': 'vm_status',
    'vm status': 'vm_status',
    'status': 'vm_status',
    'vmip': 'vm_ip',
    'vm_ip': 'vm_ip',
    'vm ip': 'vm_ip',
    'ip': 'vm_ip',
    'ipaddress': 'vm_ip',
    'ip_address': 'vm_ip',
    'internetaccess': 'internet_access',
    'internet_access': 'internet_access',
    'internet access': 'internet_access',
    'internet': 'internet_access',
    'vmos': 'vm_os',
    'vm_os': 'vm_os',
    'vm os': 'vm_os',
    'os': 'vm_os',
    'operating_system': 'vm_os',
    'vmosversion': 'vm_os_version',
    'vm_os_version': 'vm_os_version',
    'vm os version': 'vm_os_version',
    'os_version': 'vm_os_version',
    'osversion': 'vm_os_version',
    # Host details
    'hypervisor': 'hypervisor',
    'hostname': 'hostname',
    'host_name': 'hostname',
    'host name': 'hostname',
    'hostmodel': 'host_model',
    'host_model': 'host_model',
    'host model': 'host_model',
    'model': 'host_model',
    'hostip': 'host_ip',
    'host_ip': 'host_ip',
    'host ip': 'host_ip',
    'hostos': 'host_os',
    'host_os': 'host_os',
    'host os': 'host_os',
    'rack': 'rack',
    # Usage and tracking
    'deployedby': 'deployed_by',
    'deployed_by': 'deployed_by',
    'deployed by': 'deployed_by',
    'user': 'user',
    'department': 'department',
    'startdate': 'start_date',
    'start_date': 'start_date',
    'start date': 'start_date',
    'enddate': 'end_date',
    'end_date': 'end_date',
    'end date': 'end_date',
    'jiraticket': 'jira_ticket',
    'jira_ticket': 'jira_ticket',
    'jira ticket': 'jira_ticket',
    'ticket': 'jira_ticket',
    'remarks': 'remarks',
    'notes': 'remarks',
    'description': 'remarks',
}

ALIAS_TABLES: Dict[ImportType, Dict[str, str]] = {
    ImportType.ASSETS: ASSET_ALIASES,
    ImportType.COMPONENTS: COMPONENT_ALIASES,
    ImportType.ACCESSORIES: ACCESSORY_ALIASES,
    ImportType.VMS: VM_ALIASES,
}

# Header che devono comparire (lower-case) nella riga di intestazione
REQUIRED_HEADERS: Dict[ImportType, List[str]] = {
    ImportType.ASSETS: ['knoxid', 'serialnumber'],
    ImportType.COMPONENTS: ['name', 'category'],
    ImportType.ACCESSORIES: ['name', 'category'],
    ImportType.VMS: ['vmid', 'vmname', 'hypervisor'],
}

# Campi canonici che ogni riga deve valorizzare
REQUIRED_FIELDS: Dict[ImportType, List[str]] = {
    ImportType.ASSETS: ['knox_id', 'serial_number'],
    ImportType.COMPONENTS: ['name', 'category'],
    ImportType.ACCESSORIES: ['name', 'category'],
    ImportType.VMS: ['vm_id', 'vm_name', 'hypervisor'],
}


def aliases_by_field(import_type: ImportType) -> Dict[str, List[str]]:
    """Raggruppa gli alias di un tipo di import per campo canonico"""
    grouped: Dict[str, List[str]] = {}
    for alias, canonical in ALIAS_TABLES[import_type].items():
        grouped.setdefault(canonical, []).append(alias)
    return grouped
