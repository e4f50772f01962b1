"""
Tests for customer API routes
"""

from unittest.mock import patch

import httpx

from customer_gateway.utils.validators import (
    CREATE_REQUIRED_FIELDS_MESSAGE,
    INVALID_DATE_MESSAGE,
    SEARCH_CRITERIA_REQUIRED_MESSAGE,
    UPDATE_FIELDS_REQUIRED_MESSAGE,
)


class TestCreateCustomerRoute:
    """Test POST /api/customers"""

    def test_create_customer_end_to_end(self, client, data_service, sample_customer):
        data_service.reply(201, json=sample_customer)

        response = client.post("/api/customers", json={"name": "A", "alias": "B", "dob": "1990-05-01"})

        assert response.status_code == 201
        assert response.json() == {"id": "1", "name": "A", "alias": "B", "dob": "1990-05-01"}

    def test_create_customer_missing_fields(self, client, data_service):
        for body in (
            {"alias": "B", "dob": "1990-05-01"},
            {"name": "A", "dob": "1990-05-01"},
            {"name": "A", "alias": "B"},
            {},
        ):
            response = client.post("/api/customers", json=body)

            assert response.status_code == 400
            assert response.json() == {"error": CREATE_REQUIRED_FIELDS_MESSAGE}

        assert data_service.requests == []

    def test_create_customer_invalid_date(self, client, data_service):
        response = client.post("/api/customers", json={"name": "A", "alias": "B", "dob": "2024-02-30"})

        assert response.status_code == 400
        assert response.json() == {"error": INVALID_DATE_MESSAGE}
        assert data_service.requests == []

    def test_create_customer_conflict_passes_message_through(self, client, data_service):
        data_service.reply(409, json={"error": "Alias already taken"})

        response = client.post("/api/customers", json={"name": "A", "alias": "B", "dob": "1990-05-01"})

        assert response.status_code == 400
        assert response.json() == {"error": "Alias already taken"}

    def test_create_customer_data_service_down(self, client, data_service):
        data_service.fail(httpx.ConnectError("Connection refused"))

        response = client.post("/api/customers", json={"name": "A", "alias": "B", "dob": "1990-05-01"})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_create_customer_malformed_body(self, client, data_service):
        response = client.post(
            "/api/customers",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}
        assert data_service.requests == []


class TestListCustomersRoute:
    """Test GET /api/customers"""

    def test_list_customers(self, client, data_service, sample_customer):
        data_service.reply(200, json=[sample_customer])

        response = client.get("/api/customers")

        assert response.status_code == 200
        assert response.json() == [sample_customer]

    def test_list_customers_hides_backend_error(self, client, data_service):
        data_service.reply(500, json={"error": "connection pool exhausted"})

        response = client.get("/api/customers")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to retrieve customers"}

    def test_list_customers_data_service_down(self, client, data_service):
        data_service.fail(httpx.ConnectError("Connection refused"))

        response = client.get("/api/customers")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to retrieve customers"}


class TestSearchCustomerRoute:
    """Test GET /api/customers/search"""

    def test_search_requires_a_criterion(self, client, data_service):
        response = client.get("/api/customers/search")

        assert response.status_code == 400
        assert response.json() == {"error": SEARCH_CRITERIA_REQUIRED_MESSAGE}
        assert data_service.requests == []

    def test_search_forwards_only_given_parameter(self, client, data_service, sample_customer):
        data_service.reply(200, json=sample_customer)

        response = client.get("/api/customers/search", params={"alias": "B"})

        assert response.status_code == 200
        assert response.json() == sample_customer
        assert dict(data_service.last_request.url.params) == {"alias": "B"}

    def test_search_by_id(self, client, data_service, sample_customer):
        data_service.reply(200, json=sample_customer)

        client.get("/api/customers/search", params={"id": "1"})

        assert dict(data_service.last_request.url.params) == {"id": "1"}

    def test_search_not_found(self, client, data_service):
        data_service.reply(404, json={"error": "No customer matches the given criteria"})

        response = client.get("/api/customers/search", params={"name": "Nobody"})

        assert response.status_code == 404
        assert response.json() == {"error": "No customer matches the given criteria"}

    def test_search_ambiguous(self, client, data_service):
        data_service.reply(400, json={"error": "Multiple customers match"})

        response = client.get("/api/customers/search", params={"name": "A"})

        assert response.status_code == 404
        assert response.json() == {"error": "Multiple customers match"}


class TestUpdateCustomerRoute:
    """Test PUT /api/customers/{id}"""

    def test_update_customer(self, client, data_service):
        updated = {"id": "1", "name": "A", "alias": "C", "dob": "1990-05-01"}
        data_service.reply(200, json=updated)

        response = client.put("/api/customers/1", json={"alias": "C"})

        assert response.status_code == 200
        assert response.json() == updated
        assert data_service.last_request.url.path == "/customers/1"
        assert data_service.last_json() == {"alias": "C"}

    def test_update_requires_a_field(self, client, data_service):
        response = client.put("/api/customers/1", json={})

        assert response.status_code == 400
        assert response.json() == {"error": UPDATE_FIELDS_REQUIRED_MESSAGE}
        assert data_service.requests == []

    def test_update_invalid_date(self, client, data_service):
        response = client.put("/api/customers/1", json={"dob": "2024-02-30"})

        assert response.status_code == 400
        assert response.json() == {"error": INVALID_DATE_MESSAGE}
        assert data_service.requests == []

    def test_update_not_found(self, client, data_service):
        data_service.reply(404, json={"error": "Customer not found"})

        response = client.put("/api/customers/42", json={"name": "X"})

        assert response.status_code == 400
        assert response.json() == {"error": "Customer not found"}


class TestDeleteCustomerRoute:
    """Test DELETE /api/customers/{id}"""

    def test_delete_customer(self, client, data_service):
        data_service.reply(200, json={"message": "Customer deleted successfully"})

        response = client.delete("/api/customers/1")

        assert response.status_code == 200
        assert response.json() == {"message": "Customer deleted successfully"}

    def test_delete_not_found(self, client, data_service):
        data_service.reply(404, json={"error": "Customer not found"})

        response = client.delete("/api/customers/1")

        assert response.status_code == 404
        assert response.json() == {"error": "Customer not found"}

    def test_delete_unexpected_status(self, client, data_service):
        data_service.reply(500)

        response = client.delete("/api/customers/1")

        assert response.status_code == 404
        assert response.json() == {"error": "Data service returned 500 for DELETE /customers/1"}


class TestUnknownRoutes:
    """Errors raised by routing also use the error body"""

    def test_unknown_path(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_cors_allows_any_origin(self, client, data_service):
        data_service.reply(200, json=[])

        response = client.get("/api/customers", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"


class TestLocalRejectionLogging:
    """Requests rejected before reaching the data service are logged as warnings"""

    def test_create_rejection_logged(self, client):
        with patch("customer_gateway.routes.customers.logger") as mock_logger:
            client.post("/api/customers", json={"name": "A"})

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["reason"] == "missing required fields"

    def test_search_rejection_logged(self, client, data_service):
        with patch("customer_gateway.routes.customers.logger") as mock_logger:
            response = client.get("/api/customers/search")

        assert response.status_code == 400
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["reason"] == "no search parameters"
        assert data_service.requests == []

    def test_update_rejection_logged(self, client, data_service):
        with patch("customer_gateway.routes.customers.logger") as mock_logger:
            response = client.put("/api/customers/1", json={})

        assert response.status_code == 400
        mock_logger.warning.assert_called_once()
        call = mock_logger.warning.call_args
        assert call.kwargs["reason"] == "no fields to update"
        assert call.kwargs["customer_id"] == "1"
        assert data_service.requests == []
