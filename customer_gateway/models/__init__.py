"""
Data models for the customer gateway
"""

from .customer import (
    Customer,
    CustomerCreate,
    CustomerUpdate,
    DetailedHealthStatus,
    ErrorResponse,
    HealthStatus,
)

__all__ = [
    "Customer",
    "CustomerCreate",
    "CustomerUpdate",
    "DetailedHealthStatus",
    "ErrorResponse",
    "HealthStatus"
]
