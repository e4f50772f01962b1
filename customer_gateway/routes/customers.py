"""
Customer management routes
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
import structlog

from customer_gateway.models.customer import Customer, CustomerCreate, CustomerUpdate, ErrorResponse
from customer_gateway.services.customer_service import CustomerService
from customer_gateway.utils.dependencies import get_customer_service
from customer_gateway.utils.exceptions import CustomerGatewayError
from customer_gateway.utils.responses import error_response
from customer_gateway.utils.validators import (
    CREATE_REQUIRED_FIELDS_MESSAGE,
    SEARCH_CRITERIA_REQUIRED_MESSAGE,
    UPDATE_FIELDS_REQUIRED_MESSAGE,
)

logger = structlog.get_logger(__name__)

router = APIRouter()

LIST_FAILED_MESSAGE = "Failed to retrieve customers"


@router.post(
    "",
    response_model=Customer,
    status_code=201,
    responses={400: {"model": ErrorResponse}}
)
async def create_customer(
    customer: CustomerCreate,
    service: CustomerService = Depends(get_customer_service)
):
    """Create a new customer"""
    if customer.missing_required_fields():
        logger.warning("Customer creation rejected", reason="missing required fields")
        return error_response(400, CREATE_REQUIRED_FIELDS_MESSAGE)

    try:
        created = await service.create_customer(customer)
    except CustomerGatewayError as e:
        logger.warning("Failed to create customer", error=e.message)
        return error_response(400, e.message)

    return JSONResponse(status_code=201, content=created.model_dump(exclude_none=True))


@router.get(
    "",
    response_model=List[Customer],
    responses={500: {"model": ErrorResponse}}
)
async def get_all_customers(service: CustomerService = Depends(get_customer_service)):
    """List all customers"""
    try:
        customers = await service.get_all_customers()
    except CustomerGatewayError as e:
        # The underlying cause stays in the logs
        logger.error("Failed to retrieve customers", error=e.message)
        return error_response(500, LIST_FAILED_MESSAGE)

    return JSONResponse(content=[c.model_dump(exclude_none=True) for c in customers])


@router.get(
    "/search",
    response_model=Customer,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def search_customer(
    customer_id: Optional[str] = Query(None, alias="id", description="Customer ID"),
    name: Optional[str] = Query(None, description="Customer name"),
    alias: Optional[str] = Query(None, description="Customer alias"),
    service: CustomerService = Depends(get_customer_service)
):
    """Search for a single customer by id, name or alias"""
    if customer_id is None and name is None and alias is None:
        logger.warning("Customer search rejected", reason="no search parameters")
        return error_response(400, SEARCH_CRITERIA_REQUIRED_MESSAGE)

    try:
        customer = await service.search_customer(customer_id=customer_id, name=name, alias=alias)
    except CustomerGatewayError as e:
        logger.info("Customer search failed", error=e.message)
        return error_response(404, e.message)

    return JSONResponse(content=customer.model_dump(exclude_none=True))


@router.put(
    "/{customer_id}",
    response_model=Customer,
    responses={400: {"model": ErrorResponse}}
)
async def update_customer(
    customer_id: str,
    customer: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service)
):
    """Update customer information"""
    if not customer.has_changes():
        logger.warning("Customer update rejected", customer_id=customer_id, reason="no fields to update")
        return error_response(400, UPDATE_FIELDS_REQUIRED_MESSAGE)

    try:
        updated = await service.update_customer(customer_id, customer)
    except CustomerGatewayError as e:
        logger.warning("Failed to update customer", customer_id=customer_id, error=e.message)
        return error_response(400, e.message)

    return JSONResponse(content=updated.model_dump(exclude_none=True))


@router.delete(
    "/{customer_id}",
    responses={404: {"model": ErrorResponse}}
)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service)
):
    """Delete a customer"""
    try:
        result = await service.delete_customer(customer_id)
    except CustomerGatewayError as e:
        logger.warning("Failed to delete customer", customer_id=customer_id, error=e.message)
        return error_response(404, e.message)

    return JSONResponse(content=result)
