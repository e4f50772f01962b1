"""
Customer Gateway
Validates customer-management requests and forwards them to the data service
"""

__version__ = "1.0.0"
