"""
CSV Import Router

Endpoints per import di asset, componenti, accessori e VM da file CSV
ed export CSV delle macchine virtuali.
"""
from typing import Annotated, List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, UploadFile, File, Query, Path, status
from fastapi.responses import StreamingResponse

from src.core.settings import get_inventory_api_settings
from src.schemas.virtual_machine_schema import VirtualMachineResponseSchema
from src.services.csv_import.csv_exporter import CSVExporter
from src.services.csv_import.csv_import_service import CSVImportService
from src.services.csv_import.entity_mapper import EntityMapper
from src.services.csv_import.field_aliases import aliases_by_field
from src.services.csv_import.models import ImportType


router = APIRouter(
    prefix="/api/v1/csv-import",
    tags=["CSV Import"]
)


def get_csv_import_service() -> CSVImportService:
    return CSVImportService()


csv_import_service_dependency = Annotated[CSVImportService, Depends(get_csv_import_service)]


def _content_disposition(filename: str) -> str:
    # Nomi con caratteri non ASCII, spazi o separatori: forma RFC 5987 (filename*)
    quoted_filename = quote(filename)
    if quoted_filename != filename:
        return f"attachment; filename*=utf-8''{quoted_filename}"
    return f'attachment; filename="{filename}"'


def _csv_download(content: str, filename: str) -> StreamingResponse:
    return StreamingResponse(
        iter([content]),
        media_type="text/csv;charset=utf-8",
        headers={
            "Content-Disposition": _content_disposition(filename)
        }
    )


@router.post(
    "/vms/export",
    status_code=status.HTTP_200_OK,
    response_description="CSV export of virtual machines"
)
async def export_virtual_machines(
    vms: List[VirtualMachineResponseSchema] = Body(..., description="Virtual machines to export"),
    filename: Optional[str] = Query(None, description="Download filename")
):
    """
    Export virtual machines as a downloadable CSV file.

    **CSV Format**:
    - Fixed 20-column header (vmId, vmName, vmStatus, ... remarks)
    - internetAccess rendered as true/false
    - Values with commas or double quotes are quoted

    An empty list produces an empty file (no header row).
    """
    content = CSVExporter.virtual_machines_to_csv(vms)
    return _csv_download(content, filename or get_inventory_api_settings().csv_export_filename)


@router.get(
    "/templates/{import_type}",
    status_code=status.HTTP_200_OK,
    response_description="CSV template downloaded"
)
async def get_csv_template(
    import_type: str = Path(..., description="Import type: assets, components, accessories, vms")
):
    """
    Download CSV template with correct headers for import type.

    Returns a CSV file with headers only, ready to be filled with data.
    """
    template_content = CSVExporter.generate_csv_template(import_type)
    return _csv_download(template_content, f"{import_type}_template.csv")


@router.get(
    "/supported-types",
    status_code=status.HTTP_200_OK
)
async def get_supported_types():
    """
    Get list of supported import types with required headers and accepted header aliases.
    """
    return {
        "supported_types": [
            {
                "import_type": import_type.value,
                "required_headers": EntityMapper.get_required_headers(import_type),
                "aliases": aliases_by_field(import_type),
                "template_url": f"/api/v1/csv-import/templates/{import_type.value}"
            }
            for import_type in ImportType
        ]
    }


@router.post(
    "/{import_type}",
    status_code=status.HTTP_200_OK,
    response_description="CSV import completed"
)
async def import_csv(
    import_service: csv_import_service_dependency,
    import_type: str = Path(..., description="Import type: assets, components, accessories, vms"),
    file: UploadFile = File(..., description="CSV file to import"),
    validate_only: bool = Query(False, description="If true, only parse and convert without submitting")
):
    """
    Import data from CSV file.

    **Workflow**:
    1. Check file extension (.csv only; Excel files are rejected with instructions)
    2. Parse header row and validate required headers
    3. Map every row through the header alias table
    4. Validate required values (all-or-nothing: one bad row fails the file)
    5. Convert rows to import payloads
    6. If validate_only=false: POST payloads to the inventory backend

    **Required headers**:
    - assets: knoxid, serialnumber
    - components / accessories: name, category
    - vms: vmid, vmname, hypervisor

    **Example**: assets.csv
    ```csv
    knoxid,serialnumber,category
    K100,SN001,Laptop
    ```
    """
    content = await file.read()

    result = await import_service.import_data_from_file(
        filename=file.filename,
        file_content=content,
        import_type=import_type,
        validate_only=validate_only
    )

    return result.to_dict()
