"""
Gateway failure types

Every failure the gateway can surface to a caller derives from
CustomerGatewayError and carries the message returned in the error body.
"""


class CustomerGatewayError(Exception):
    """Base class for failures reported back to the caller"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerValidationError(CustomerGatewayError):
    """Request rejected locally, before any call to the data service"""
    pass


class DataServiceError(CustomerGatewayError):
    """The data service answered with an error, or with a body that could not be decoded"""
    pass


class DataServiceUnavailableError(CustomerGatewayError):
    """The data service could not be reached"""
    pass
