"""
Customer service business logic

Validates what needs parsing, forwards each operation to the data service with
exactly one request, and turns the response into either models or a
CustomerGatewayError.
"""

from typing import Any, Dict, FrozenSet, List, Optional
from urllib.parse import quote

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from customer_gateway.models.customer import Customer, CustomerCreate, CustomerUpdate
from customer_gateway.utils.data_service_client import DataServiceClient
from customer_gateway.utils.exceptions import DataServiceError
from customer_gateway.utils.validators import validate_date_of_birth


logger = structlog.get_logger(__name__)

# Statuses whose body carries an {"error": ...} message meant for the caller
CREATE_ERROR_STATUSES: FrozenSet[int] = frozenset({400, 409})
LIST_ERROR_STATUSES: FrozenSet[int] = frozenset()
SEARCH_ERROR_STATUSES: FrozenSet[int] = frozenset({400, 404})
UPDATE_ERROR_STATUSES: FrozenSet[int] = frozenset({400, 404, 409})
DELETE_ERROR_STATUSES: FrozenSet[int] = frozenset({404})

INVALID_RESPONSE_MESSAGE = "Invalid response from data service"

_customer_adapter = TypeAdapter(Customer)
_customer_list_adapter = TypeAdapter(List[Customer])
_payload_adapter = TypeAdapter(Dict[str, Any])


class CustomerService:
    """Customer operations backed by the data service"""

    def __init__(self, client: DataServiceClient):
        self.client = client

    async def create_customer(self, customer: CustomerCreate) -> Customer:
        """Create a customer; the data service assigns its id"""
        validate_date_of_birth(customer.dob)

        endpoint = "/customers"
        response = await self.client.request(
            "POST", endpoint, json=customer.model_dump(exclude_none=True)
        )
        self._raise_for_status(response, "POST", endpoint, CREATE_ERROR_STATUSES)

        created = self._decode(response, _customer_adapter)
        logger.info("Customer created", customer_id=created.id)
        return created

    async def get_all_customers(self) -> List[Customer]:
        """List all customers in the order the data service returns them"""
        endpoint = "/customers"
        response = await self.client.request("GET", endpoint)
        self._raise_for_status(response, "GET", endpoint, LIST_ERROR_STATUSES)
        return self._decode(response, _customer_list_adapter)

    async def search_customer(
        self,
        customer_id: Optional[str] = None,
        name: Optional[str] = None,
        alias: Optional[str] = None
    ) -> Customer:
        """Find the single customer matching the given criteria"""
        criteria = {"id": customer_id, "name": name, "alias": alias}
        params = {key: value for key, value in criteria.items() if value is not None}

        endpoint = "/customers/search"
        response = await self.client.request("GET", endpoint, params=params)
        self._raise_for_status(response, "GET", endpoint, SEARCH_ERROR_STATUSES)
        return self._decode(response, _customer_adapter)

    async def update_customer(self, customer_id: str, customer: CustomerUpdate) -> Customer:
        """Apply a partial update; only the fields present are sent"""
        if customer.dob is not None:
            validate_date_of_birth(customer.dob)

        endpoint = _customer_path(customer_id)
        response = await self.client.request(
            "PUT", endpoint, json=customer.model_dump(exclude_none=True)
        )
        self._raise_for_status(response, "PUT", endpoint, UPDATE_ERROR_STATUSES)

        updated = self._decode(response, _customer_adapter)
        logger.info("Customer updated", customer_id=customer_id)
        return updated

    async def delete_customer(self, customer_id: str) -> Dict[str, Any]:
        """Delete a customer and return the data service's confirmation payload"""
        endpoint = _customer_path(customer_id)
        response = await self.client.request("DELETE", endpoint)
        self._raise_for_status(response, "DELETE", endpoint, DELETE_ERROR_STATUSES)

        if not response.content:
            result: Dict[str, Any] = {}
        else:
            result = self._decode(response, _payload_adapter)
        logger.info("Customer deleted", customer_id=customer_id)
        return result

    @staticmethod
    def _raise_for_status(
        response: httpx.Response,
        method: str,
        endpoint: str,
        error_statuses: FrozenSet[int]
    ) -> None:
        if response.is_success:
            return

        status_code = response.status_code
        if status_code in error_statuses:
            message = _extract_error_message(response)
            if message is not None:
                logger.warning(
                    "Data service rejected request",
                    method=method,
                    endpoint=endpoint,
                    status_code=status_code,
                    error=message
                )
                raise DataServiceError(message)

        logger.error(
            "Unexpected data service response",
            method=method,
            endpoint=endpoint,
            status_code=status_code
        )
        raise DataServiceError(
            f"Data service returned {status_code} for {method} {endpoint}"
        )

    @staticmethod
    def _decode(response: httpx.Response, adapter: TypeAdapter) -> Any:
        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            logger.error(
                "Failed to decode data service response",
                status_code=response.status_code,
                error_count=e.error_count()
            )
            raise DataServiceError(INVALID_RESPONSE_MESSAGE) from e


def _extract_error_message(response: httpx.Response) -> Optional[str]:
    """Return the body's `error` string, or None when there is none"""
    try:
        body = response.json()
    except ValueError:
        return None

    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


def _customer_path(customer_id: str) -> str:
    """Path of a single customer, with the id encoded as one literal segment"""
    segment = quote(customer_id, safe='')
    # httpx drops "." and ".." path segments, so encode the dots themselves
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return f"/customers/{segment}"
