"""
CSV Import System Package

Import di asset, componenti, accessori e macchine virtuali da file CSV,
con mapping tollerante degli header ed export CSV delle macchine virtuali.
"""

from .models import ImportType, ImportResult, CSVAsset, CSVComponent, CSVAccessory, CSVVirtualMachine
from .csv_parser import CSVParser
from .entity_mapper import EntityMapper
from .record_converter import RecordConverter
from .csv_exporter import CSVExporter
from .csv_import_service import CSVImportService

__all__ = [
    'ImportType',
    'ImportResult',
    'CSVAsset',
    'CSVComponent',
    'CSVAccessory',
    'CSVVirtualMachine',
    'CSVParser',
    'EntityMapper',
    'RecordConverter',
    'CSVExporter',
    'CSVImportService'
]
