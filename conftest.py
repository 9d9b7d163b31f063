"""
Root conftest.py: configura il Python path e le fixture condivise dei test.

Il backend di bulk-import è simulato con httpx.MockTransport, nessuna
richiesta di rete reale viene eseguita.
"""
import json
import sys
from pathlib import Path

import httpx
import pytest
from starlette.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.main import app  # noqa: E402
from src.routers.csv_import import get_csv_import_service  # noqa: E402
from src.services.csv_import.csv_import_service import CSVImportService  # noqa: E402
from src.services.external.inventory_api_client import InventoryApiClient  # noqa: E402

TEST_BACKEND_URL = "http://inventory.test"


class FakeInventoryBackend:
    """Backend simulato: registra le richieste e risponde con lo stato configurato"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, json=self.body)
        records = next(iter(json.loads(request.content).values()))
        return httpx.Response(self.status_code, json={"imported": len(records), "failed": 0})

    @property
    def payloads(self):
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture()
def inventory_backend():
    return FakeInventoryBackend()


@pytest.fixture()
def client(inventory_backend):
    """TestClient con il servizio di import collegato al backend simulato"""
    def override_get_csv_import_service():
        return CSVImportService(
            client=InventoryApiClient(base_url=TEST_BACKEND_URL, transport=httpx.MockTransport(inventory_backend))
        )

    app.dependency_overrides[get_csv_import_service] = override_get_csv_import_service
    yield TestClient(app)
    app.dependency_overrides.clear()
