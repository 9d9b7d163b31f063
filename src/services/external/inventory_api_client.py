import httpx
import json
import logging
from typing import Any, Dict, List, Optional

from src.core.exceptions import SubmissionError
from src.core.settings import get_inventory_api_settings

logger = logging.getLogger(__name__)


class InventoryApiClient:
    """HTTP client for the backend inventory bulk-import endpoints"""

    DEFAULT_ERROR_MESSAGE = "Import failed"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = get_inventory_api_settings()
        self.base_url = (base_url or self.settings.inventory_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.inventory_api_timeout
        self.transport = transport

    async def submit(self, import_type: str, records: List[Dict[str, Any]]) -> Any:
        """
        POST dei record convertiti su /api/{import_type}/import

        Args:
            import_type: assets, components, accessories o vms
            records: Payload già serializzati (chiavi camelCase)

        Returns:
            Corpo JSON della risposta del backend

        Raises:
            SubmissionError: Se il backend risponde con uno stato non 2xx o la richiesta fallisce
        """
        url = f"{self.base_url}/api/{import_type}/import"
        headers = self._get_headers()
        payload = {import_type: records}

        logger.info(f"Inventory Import Request URL: {url}")
        logger.info(f"Inventory Import Request Records: {len(records)}")
        logger.debug(f"Inventory Import Request Payload: {json.dumps(payload, ensure_ascii=False)}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Inventory Import request failed: {e}", extra={"url": url, "import_type": import_type})
            raise SubmissionError(f"Import request failed: {e}", details={"import_type": import_type})

        logger.info(f"Inventory Import Response Status: {response.status_code}")

        if not response.is_success:
            error_message = self._extract_error_message(response)
            logger.error(
                f"Inventory Import rejected ({response.status_code}): {error_message}",
                extra={"url": url, "import_type": import_type, "status_code": response.status_code}
            )
            raise SubmissionError(error_message, upstream_status=response.status_code, details={"import_type": import_type})

        # L'import è già avvenuto: un corpo vuoto o non JSON non è un errore
        try:
            return response.json()
        except ValueError:
            logger.warning(
                f"Inventory Import Response is not JSON ({response.status_code}), returning None",
                extra={"url": url, "import_type": import_type}
            )
            return None

    async def import_assets(self, assets: List[Dict[str, Any]]) -> Any:
        """Invia asset già convertiti a /api/assets/import"""
        return await self.submit("assets", assets)

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    def _extract_error_message(self, response: httpx.Response) -> str:
        """
        Estrae il campo `message` dal corpo di errore, con fallback generico

        Args:
            response: Risposta HTTP non 2xx

        Returns:
            Messaggio d'errore da mostrare all'utente
        """
        try:
            error_data = response.json()
        except ValueError:
            return self.DEFAULT_ERROR_MESSAGE

        if isinstance(error_data, dict) and error_data.get("message"):
            return str(error_data["message"])
        return self.DEFAULT_ERROR_MESSAGE
