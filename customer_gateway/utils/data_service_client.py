"""
Data Service HTTP Client
Client for communicating with the customer data service API

A single AsyncClient is opened at app startup and shared by every request.
The base URL and connection limits are fixed at construction time.
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from customer_gateway.utils.exceptions import DataServiceUnavailableError

logger = structlog.get_logger(__name__)


class DataServiceClient:
    """
    HTTP client for data service operations.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not started, falls back to a per-request client
    """

    # Connection pool settings (per worker)
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    KEEPALIVE_EXPIRY = 5.0

    HEALTH_CHECK_TIMEOUT = 5.0

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._base_url = base_url.rstrip('/')
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def started(self) -> bool:
        return self._client is not None

    def _client_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"base_url": self._base_url}
        # Passing timeout=None to httpx disables timeouts entirely, so leave it out
        if self._timeout is not None:
            options["timeout"] = self._timeout
        if self._transport is not None:
            options["transport"] = self._transport
        return options

    async def start(self):
        """Open the shared HTTP client"""
        if self._client is not None:
            logger.warning("DataServiceClient already started")
            return

        limits = httpx.Limits(
            max_connections=self.MAX_CONNECTIONS,
            max_keepalive_connections=self.MAX_KEEPALIVE,
            keepalive_expiry=self.KEEPALIVE_EXPIRY
        )
        self._client = httpx.AsyncClient(limits=limits, **self._client_options())

        logger.info(
            "DataServiceClient started",
            base_url=self._base_url,
            max_connections=self.MAX_CONNECTIONS
        )

    async def stop(self):
        """Close the shared HTTP client and release its connections"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("DataServiceClient stopped")

    async def request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """
        Send one request to the data service and return the response as-is.

        Status codes are left to the caller to interpret. Transport failures
        (connection refused, timeouts, protocol errors) are raised as
        DataServiceUnavailableError.
        """
        try:
            if self._client is not None:
                return await self._client.request(method, endpoint, **kwargs)

            async with httpx.AsyncClient(**self._client_options()) as client:
                return await client.request(method, endpoint, **kwargs)

        except httpx.RequestError as e:
            detail = str(e) or e.__class__.__name__
            logger.error(
                "Request to data service failed",
                method=method,
                endpoint=endpoint,
                error=detail
            )
            raise DataServiceUnavailableError(f"Failed to connect to data service: {detail}") from e

    async def health_check(self) -> str:
        """Call the data service health endpoint"""
        try:
            response = await self.request("GET", "/health", timeout=self.HEALTH_CHECK_TIMEOUT)
        except DataServiceUnavailableError:
            return "unavailable"

        if response.status_code == 200:
            return "healthy"

        logger.warning("Data service health check failed", status_code=response.status_code)
        return "unhealthy"
