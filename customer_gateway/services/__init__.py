"""
Business logic services for the customer gateway
"""

from .customer_service import CustomerService

__all__ = ["CustomerService"]
