"""
CSV Exporter for Import System.

Serializes virtual machines back to CSV text and builds header-only templates
for every import type. Unlike the import parser, export applies standard CSV
quoting to values containing commas or double quotes.
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple, Union

from src.schemas.virtual_machine_schema import VirtualMachineSchema

from .entity_mapper import EntityMapper
from .models import ImportType

# (header CSV, attributo dello schema) in ordine di colonna
VM_EXPORT_COLUMNS: List[Tuple[str, str]] = [
    ('vmId', 'vm_id'),
    ('vmName', 'vm_name'),
    ('vmStatus', 'vm_status'),
    ('vmIp', 'vm_ip'),
    ('internetAccess', 'internet_access'),
    ('vmOs', 'vm_os'),
    ('vmOsVersion', 'vm_os_version'),
    ('hypervisor', 'hypervisor'),
    ('hostname', 'hostname'),
    ('hostModel', 'host_model'),
    ('hostIp', 'host_ip'),
    ('hostOs', 'host_os'),
    ('rack', 'rack'),
    ('deployedBy', 'deployed_by'),
    ('user', 'user'),
    ('department', 'department'),
    ('startDate', 'start_date'),
    ('endDate', 'end_date'),
    ('jiraTicket', 'jira_ticket'),
    ('remarks', 'remarks'),
]

TEMPLATE_HEADERS: Dict[ImportType, List[str]] = {
    ImportType.ASSETS: [
        'knoxId', 'serialNumber', 'assetTag', 'name', 'category', 'status', 'model',
        'purchaseDate', 'manufacturer', 'purchaseCost', 'location', 'ipAddress',
        'macAddress', 'osType', 'department',
    ],
    ImportType.COMPONENTS: [
        'name', 'category', 'quantity', 'serialNumber', 'manufacturer', 'model', 'notes',
    ],
    ImportType.ACCESSORIES: [
        'name', 'category', 'status', 'quantity', 'serialNumber', 'manufacturer', 'model', 'notes',
    ],
    ImportType.VMS: [header for header, _ in VM_EXPORT_COLUMNS],
}


class CSVExporter:
    """
    Serializzatore CSV per l'export.

    Stateless exporter - tutti i metodi sono statici.
    """

    DELIMITER = ','

    @staticmethod
    def escape_value(value: str) -> str:
        """Racchiude tra doppi apici i valori con virgole o apici, raddoppiando gli apici interni"""
        if ',' in value or '"' in value:
            return '"' + value.replace('"', '""') + '"'
        return value

    @staticmethod
    def render_value(value) -> str:
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if value is None:
            return ''
        return CSVExporter.escape_value(str(value))

    @staticmethod
    def virtual_machines_to_csv(vms: Sequence[VirtualMachineSchema]) -> str:
        """
        Converte le VM in testo CSV con header fisso a 20 colonne.

        Args:
            vms: Sequenza di VM (l'eventuale id non viene esportato)

        Returns:
            Testo CSV, stringa vuota se la sequenza è vuota (nessun header)
        """
        if not vms:
            return ''

        csv_lines = [CSVExporter.DELIMITER.join(header for header, _ in VM_EXPORT_COLUMNS)]
        for vm in vms:
            row = [CSVExporter.render_value(getattr(vm, attribute)) for _, attribute in VM_EXPORT_COLUMNS]
            csv_lines.append(CSVExporter.DELIMITER.join(row))

        return '\n'.join(csv_lines)

    @staticmethod
    def generate_csv_template(import_type: Union[str, ImportType]) -> str:
        """
        Genera template CSV con headers per tipo di import.

        Per le VM il template coincide con l'header dell'export.

        Returns:
            Stringa CSV con la sola riga di intestazione
        """
        import_type = EntityMapper.resolve_import_type(import_type)
        return CSVExporter.DELIMITER.join(TEMPLATE_HEADERS[import_type]) + '\n'
