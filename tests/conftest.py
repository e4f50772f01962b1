"""
Pytest fixtures for customer gateway tests
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from customer_gateway.services.customer_service import CustomerService
from customer_gateway.utils.data_service_client import DataServiceClient


DATA_SERVICE_URL = "http://data-service.test"


class StubDataService:
    """Stands in for the data service: records requests and replays one canned reply"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._status_code = 200
        self._json: Any = {}
        self._content: Optional[bytes] = None
        self._error: Optional[Exception] = None

    def reply(self, status_code: int = 200, json: Any = None, content: Optional[bytes] = None):
        self._status_code = status_code
        self._json = json
        self._content = content
        self._error = None

    def fail(self, error: Exception):
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        if self._json is None:
            return httpx.Response(self._status_code)
        return httpx.Response(self._status_code, json=self._json)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the data service"
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def data_service() -> StubDataService:
    """Stub data service"""
    return StubDataService()


@pytest.fixture
def data_service_client(data_service) -> DataServiceClient:
    """Data service client wired to the stub"""
    return DataServiceClient(DATA_SERVICE_URL, transport=httpx.MockTransport(data_service.handler))


@pytest.fixture
def customer_service(data_service_client) -> CustomerService:
    """Customer service using the stubbed client"""
    return CustomerService(data_service_client)


@pytest.fixture
def client(data_service_client):
    """Test client with the data service dependency overridden"""
    from customer_gateway.main import app
    from customer_gateway.utils.dependencies import get_data_service_client

    app.dependency_overrides[get_data_service_client] = lambda: data_service_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_customer() -> Dict[str, Any]:
    """Customer as returned by the data service"""
    return {
        "id": "1",
        "name": "A",
        "alias": "B",
        "dob": "1990-05-01"
    }
