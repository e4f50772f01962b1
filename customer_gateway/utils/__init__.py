"""
Utility modules for the customer gateway
"""

from .data_service_client import DataServiceClient
from .exceptions import (
    CustomerGatewayError,
    CustomerValidationError,
    DataServiceError,
    DataServiceUnavailableError,
)
from .validators import is_valid_date

__all__ = [
    "DataServiceClient",
    "CustomerGatewayError",
    "CustomerValidationError",
    "DataServiceError",
    "DataServiceUnavailableError",
    "is_valid_date"
]
