"""
Customer data models and schemas
"""

from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CustomerBase(BaseModel):
    """Fields shared by every customer representation"""
    name: Optional[str] = Field(None, description="Customer name")
    alias: Optional[str] = Field(None, description="Customer alias")
    dob: Optional[str] = Field(None, description="Date of birth (YYYY-MM-DD)")


# Request bodies leave every field optional so the handlers can answer
# missing fields with their own messages instead of a schema error.
class CustomerCreate(CustomerBase):
    """Schema for creating a customer"""

    def missing_required_fields(self) -> bool:
        return self.name is None or self.alias is None or self.dob is None


class CustomerUpdate(CustomerBase):
    """Schema for a partial customer update; absent fields are left unchanged"""

    def has_changes(self) -> bool:
        return self.name is not None or self.alias is not None or self.dob is not None


class Customer(CustomerBase):
    """Customer record as returned by the data service"""
    id: Optional[Union[int, str]] = Field(None, description="Identifier assigned by the data service")

    model_config = ConfigDict(extra="ignore")


class ErrorResponse(BaseModel):
    """Error body returned on every failure path"""
    error: str = Field(..., description="Human-readable error message")


class HealthStatus(BaseModel):
    """Gateway health with the status of its dependencies"""
    status: str = Field(..., description="Gateway status")
    dependencies: Dict[str, str] = Field(default_factory=dict, description="Status by dependency name")


class DetailedHealthStatus(HealthStatus):
    """Health status backed by a check of the data service"""
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: str = Field(..., description="Time of the check (ISO 8601)")
