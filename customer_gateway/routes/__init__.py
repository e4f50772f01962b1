"""
API routes for the customer gateway
"""

from . import customers, health

__all__ = ["customers", "health"]
