"""
Health check routes for the customer gateway
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
import structlog

from customer_gateway.config import Settings, get_settings
from customer_gateway.models.customer import DetailedHealthStatus, HealthStatus
from customer_gateway.utils.data_service_client import DataServiceClient
from customer_gateway.utils.dependencies import get_data_service_client

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
def health_check():
    """Health check endpoint; reports the data service without probing it"""
    return HealthStatus(
        status="healthy",
        dependencies={"dataService": "healthy"}
    )


@router.get("/health/detailed", response_model=DetailedHealthStatus)
async def detailed_health_check(
    client: DataServiceClient = Depends(get_data_service_client),
    settings: Settings = Depends(get_settings)
):
    """Health check that calls the data service"""
    data_service_status = await client.health_check()
    status = "healthy" if data_service_status == "healthy" else "degraded"

    if status != "healthy":
        logger.warning("Gateway degraded", data_service=data_service_status)

    return DetailedHealthStatus(
        service=settings.service_name,
        status=status,
        version=settings.service_version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        dependencies={"dataService": data_service_status}
    )
