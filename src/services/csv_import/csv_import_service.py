"""
CSV Import Service - Main orchestration service.

Coordinates the whole CSV import workflow: file gate, parsing, conversion
and submission to the backend inventory API.
"""
from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from src.services.external.inventory_api_client import InventoryApiClient

from .entity_mapper import EntityMapper
from .file_reader import parse_file
from .models import ImportResult, ImportType
from .record_converter import RecordConverter

logger = logging.getLogger(__name__)


class CSVImportService:
    """
    Service principale per orchestrazione import CSV.

    Coordina: lettura file, parsing, conversione, invio al backend.
    """

    def __init__(self, client: Optional[InventoryApiClient] = None):
        self.client = client or InventoryApiClient()

    @staticmethod
    def convert_content(content: str, import_type: Union[str, ImportType]) -> List[BaseModel]:
        """
        Parse + conversione del testo CSV nei payload del tipo richiesto.

        Args:
            content: Testo CSV
            import_type: Tipo di import

        Returns:
            Lista di schema (AssetSchema, ComponentSchema, AccessorySchema o VirtualMachineSchema)
        """
        import_type = EntityMapper.resolve_import_type(import_type)
        records = EntityMapper.parse_records(content, import_type)

        if import_type is ImportType.ASSETS:
            return RecordConverter.to_assets(records)
        if import_type is ImportType.COMPONENTS:
            return RecordConverter.to_components(records)
        if import_type is ImportType.ACCESSORIES:
            return RecordConverter.to_accessories(records)
        return RecordConverter.to_virtual_machines(records)

    @staticmethod
    def serialize(items: List[BaseModel]) -> List[Dict[str, Any]]:
        """Serializza i payload con chiavi camelCase; i campi null restano presenti"""
        return [item.model_dump(mode="json", by_alias=True) for item in items]

    async def import_data_from_file(
        self,
        filename: Optional[str],
        file_content: bytes,
        import_type: Union[str, ImportType],
        validate_only: bool = False
    ) -> ImportResult:
        """
        Import completo da file caricato.

        Workflow:
        1. Validate import type
        2. Read file (solo .csv)
        3. Parse + convert (tutto-o-niente)
        4. Submit to backend, se validate_only è False

        Args:
            filename: Nome file caricato
            file_content: Contenuto in bytes
            import_type: assets, components, accessories o vms
            validate_only: Se True, nessun invio al backend

        Returns:
            ImportResult con i record convertiti e la risposta del backend

        Raises:
            CSVImportException: Errori di formato o di contenuto del file
            SubmissionError: Se il backend rifiuta l'import
        """
        started_at = datetime.now()
        import_type = EntityMapper.resolve_import_type(import_type)

        parse_start = time.time()
        content = parse_file(filename, file_content)
        records = self.serialize(self.convert_content(content, import_type))
        parse_time = time.time() - parse_start

        logger.info(f"Converted {len(records)} {import_type.value} from {filename}")

        if validate_only:
            return ImportResult(
                import_type=import_type,
                filename=filename or "",
                total_records=len(records),
                submitted=False,
                records=records,
                parse_time=parse_time,
                started_at=started_at,
                completed_at=datetime.now()
            )

        submit_start = time.time()
        response = await self.client.submit(import_type.value, records)
        submit_time = time.time() - submit_start

        logger.info(f"Import completed: {len(records)} {import_type.value} submitted")

        return ImportResult(
            import_type=import_type,
            filename=filename or "",
            total_records=len(records),
            submitted=True,
            records=records,
            response=response,
            parse_time=parse_time,
            submit_time=submit_time,
            started_at=started_at,
            completed_at=datetime.now()
        )

    async def import_assets(self, assets: List[Dict[str, Any]]) -> Any:
        """Invia al backend asset già convertiti"""
        return await self.client.import_assets(assets)
