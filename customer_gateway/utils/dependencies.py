"""
FastAPI dependencies
"""

from fastapi import Depends, Request

from customer_gateway.config import get_settings
from customer_gateway.services.customer_service import CustomerService
from customer_gateway.utils.data_service_client import DataServiceClient


def get_data_service_client(request: Request) -> DataServiceClient:
    """Dependency to get the shared data service client"""
    client = getattr(request.app.state, "data_service_client", None)
    if client is None:
        # Lifespan has not run; an unstarted client opens one connection per request
        settings = get_settings()
        client = DataServiceClient(settings.data_service_url, timeout=settings.data_service_timeout)
        request.app.state.data_service_client = client
    return client


def get_customer_service(
    client: DataServiceClient = Depends(get_data_service_client)
) -> CustomerService:
    """Dependency to get a customer service bound to the shared client"""
    return CustomerService(client)
