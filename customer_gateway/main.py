"""
Customer Gateway - Main Application
Validates customer requests and forwards them to the data service
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from customer_gateway.config import get_settings
from customer_gateway.routes import customers, health
from customer_gateway.utils.data_service_client import DataServiceClient
from customer_gateway.utils.logging import configure_logging
from customer_gateway.utils.responses import error_response


settings = get_settings()
configure_logging(settings.log_level, settings.log_json)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting Customer Gateway")
    settings.log_config()

    client = DataServiceClient(settings.data_service_url, timeout=settings.data_service_timeout)
    await client.start()
    app.state.data_service_client = client

    yield

    await client.stop()
    logger.info("Customer Gateway shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Customer Gateway",
    description="Validates customer management requests and forwards them to the data service",
    version=settings.service_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies get an {"error": ...} body like every other failure"""
    logger.warning(
        "Request validation failed",
        method=request.method,
        url=str(request.url),
        errors=len(exc.errors())
    )
    return error_response(400, "Invalid request body")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        url=str(request.url),
        exc_info=True
    )
    return error_response(500, "Internal server error")


# Register routes
app.include_router(health.router, prefix=settings.api_prefix, tags=["Health"])
app.include_router(customers.router, prefix=f"{settings.api_prefix}/customers", tags=["Customers"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "docs": "/docs"
    }


def run():
    """Run the gateway with uvicorn"""
    import uvicorn
    uvicorn.run(
        "customer_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
