"""
Entity Mapper for CSV Import System.

Maps parsed CSV rows to the typed intermediate records of every import type.
Configuration is declarative: alias tables, required headers and required
fields live in `field_aliases`.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Type, Union

from src.core.exceptions import IncompleteRecordError, NoRecordsError, UnsupportedImportTypeError

from .csv_parser import CSVParser, ParsedRow
from .field_aliases import ALIAS_TABLES, REQUIRED_FIELDS, REQUIRED_HEADERS
from .models import (
    ImportType,
    CSVAsset,
    CSVComponent,
    CSVAccessory,
    CSVVirtualMachine,
)

logger = logging.getLogger(__name__)

CSVRecord = Union[CSVAsset, CSVComponent, CSVAccessory, CSVVirtualMachine]


class EntityMapper:
    """
    Mapper righe CSV → record intermedi.

    Stateless mapper - configurazione dichiarativa.
    """

    RECORD_MAPPING: Dict[ImportType, Type] = {
        ImportType.ASSETS: CSVAsset,
        ImportType.COMPONENTS: CSVComponent,
        ImportType.ACCESSORIES: CSVAccessory,
        ImportType.VMS: CSVVirtualMachine,
    }

    @staticmethod
    def resolve_import_type(import_type: Union[str, ImportType]) -> ImportType:
        """Converte una stringa nel tipo di import, o solleva UnsupportedImportTypeError"""
        if isinstance(import_type, ImportType):
            return import_type
        try:
            return ImportType(import_type)
        except ValueError:
            raise UnsupportedImportTypeError(
                str(import_type), [item.value for item in ImportType]
            )

    @staticmethod
    def get_required_headers(import_type: ImportType) -> List[str]:
        """Ottiene lista header richiesti per tipo di import"""
        return list(REQUIRED_HEADERS[import_type])

    @staticmethod
    def map_row(headers: List[str], values: List[str], aliases: Dict[str, str]) -> Dict[str, str]:
        """
        Mappa una riga sui campi canonici tramite la tabella alias.

        Header sconosciuti vengono ignorati; se più colonne puntano allo
        stesso campo vince quella più a destra.
        """
        mapped: Dict[str, str] = {}
        for header, value in zip(headers, values):
            canonical = aliases.get(header)
            if canonical is not None:
                mapped[canonical] = value
        return mapped

    @staticmethod
    def _check_required_fields(row: ParsedRow, mapped: Dict[str, str], import_type: ImportType) -> None:
        required = REQUIRED_FIELDS[import_type]
        if all(mapped.get(field) for field in required):
            return

        if import_type is ImportType.VMS:
            vm_id = mapped.get('vm_id', '')
            vm_name = mapped.get('vm_name', '')
            hypervisor = mapped.get('hypervisor', '')
            raise IncompleteRecordError(
                row.line_number,
                f'Line {row.line_number}: Missing required field(s). '
                f'vmId: "{vm_id}", vmName: "{vm_name}", hypervisor: "{hypervisor}"',
                {'vmId': vm_id, 'vmName': vm_name, 'hypervisor': hypervisor}
            )
        raise IncompleteRecordError(row.line_number)

    @staticmethod
    def parse_records(content: str, import_type: Union[str, ImportType]) -> List[CSVRecord]:
        """
        Parse testo CSV nei record intermedi del tipo richiesto.

        Tutto-o-niente: il primo errore interrompe l'intero file.

        Args:
            content: Testo CSV
            import_type: Tipo di import

        Returns:
            Lista di record (CSVAsset, CSVComponent, CSVAccessory o CSVVirtualMachine)

        Raises:
            CSVImportException: Su input malformato, header mancanti, colonne
                non coerenti, campi obbligatori vuoti o (solo VM) nessun record
        """
        import_type = EntityMapper.resolve_import_type(import_type)
        aliases = ALIAS_TABLES[import_type]
        record_class = EntityMapper.RECORD_MAPPING[import_type]

        headers, rows = CSVParser.parse_grid(content, REQUIRED_HEADERS[import_type])

        records: List[CSVRecord] = []
        for row in rows:
            mapped = EntityMapper.map_row(headers, row.values, aliases)
            EntityMapper._check_required_fields(row, mapped, import_type)
            records.append(record_class(**mapped))

        # Solo le VM considerano un file senza record come errore
        if import_type is ImportType.VMS and not records:
            raise NoRecordsError()

        logger.info(f"Parsed {len(records)} {import_type.value} records from CSV")
        return records

    @staticmethod
    def parse_assets(content: str) -> List[CSVAsset]:
        """Required fields: knoxid, serialnumber"""
        return EntityMapper.parse_records(content, ImportType.ASSETS)

    @staticmethod
    def parse_components(content: str) -> List[CSVComponent]:
        return EntityMapper.parse_records(content, ImportType.COMPONENTS)

    @staticmethod
    def parse_accessories(content: str) -> List[CSVAccessory]:
        return EntityMapper.parse_records(content, ImportType.ACCESSORIES)

    @staticmethod
    def parse_virtual_machines(content: str) -> List[CSVVirtualMachine]:
        """Required fields: vmid, vmname, hypervisor. Raises NoRecordsError on empty result."""
        return EntityMapper.parse_records(content, ImportType.VMS)
