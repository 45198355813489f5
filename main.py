"""
JSON Vault — Main Application

FastAPI application entry point.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
import time
import structlog

from config import settings, get_settings
from exceptions import AppError, PayloadTooLargeError
from services import build_services
from utils.time_utils import format_timestamp, utc_now

logging.basicConfig(format="%(message)s", level=settings.log_level)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer() if settings.is_production
            else structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: Build the store and services, start the access log writer
    Shutdown: Flush pending log lines
    """
    app_settings = get_settings()
    services = build_services(app_settings)
    app.state.settings = app_settings
    app.state.services = services

    logger.info(
        "application_starting",
        environment=app_settings.environment,
        debug=app_settings.debug,
        data_file=app_settings.data_file,
        public_dir=app_settings.public_dir,
        retention_days=app_settings.retention_days
    )

    try:
        logger.info("store_ready", mappings=services.store.count())
    except AppError as e:
        logger.error("store_unavailable", error=e.message)

    await services.access_log.start()

    yield

    # Shutdown
    logger.info("application_shutting_down")
    await services.access_log.stop()


# Create FastAPI app
app = FastAPI(
    title="JSON Vault",
    description="Store JSON payloads under a key and read them back for one day",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# ===================
# MIDDLEWARE
# ===================
# Registered innermost first: expiry runs before logging, logging before
# the body limit and the routes.

BODY_METHODS = {"POST", "PUT", "PATCH"}


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """
    Reject bodies larger than max_body_bytes.

    A declared Content-Length is checked up front; bodies sent without one
    (chunked) are read and measured before the route sees them.
    """
    limit = request.app.state.settings.max_body_bytes
    content_length = request.headers.get("content-length")

    if content_length and content_length.isdigit():
        too_large = int(content_length) > limit
    elif request.method in BODY_METHODS:
        too_large = len(await request.body()) > limit
    else:
        too_large = False

    if too_large:
        error = PayloadTooLargeError(limit)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())
    return await call_next(request)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Write access and performance lines for every request."""
    access_log = request.app.state.services.access_log
    method = request.method
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    access_log.record_request(
        method,
        url,
        format_timestamp(utc_now()),
        client=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    start_time = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start_time) * 1000)

    access_log.record_response(method, url, response.status_code, duration_ms)
    return response


@app.middleware("http")
async def expire_old_mappings(request: Request, call_next):
    """Purge expired mappings, then always handle the request."""
    services = request.app.state.services
    try:
        services.expiry.sweep()
    except Exception as e:
        logger.error(
            "expiry_sweep_failed",
            error=str(e),
            error_type=type(e).__name__
        )
        services.error_log.record(e)
    return await call_next(request)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===================
# ERROR HANDLERS
# ===================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Application errors raised outside a route's own handling."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and parameters are bad requests."""
    logger.info("request_rejected", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Invalid request body",
            "code": "VALIDATION_ERROR"
        }
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Framework HTTP errors (unknown route, wrong method) in the service envelope."""
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": message,
            "code": "ROUTE_NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        },
        headers=getattr(exc, "headers", None)
    )


def exposes_error_details(app_settings) -> bool:
    """Internal error text reaches clients only in debug, never in production."""
    return app_settings.debug and not app_settings.is_production


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler.

    Catches unhandled exceptions and returns standard error format.
    """
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__
    )
    services = getattr(request.app.state, "services", None)
    if services is not None:
        services.error_log.record(exc)

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Internal server error",
            "code": "INTERNAL_ERROR",
            "error": str(exc) if exposes_error_details(request.app.state.settings) else None,
            "timestamp": format_timestamp(utc_now())
        }
    )


# ===================
# ROUTES
# ===================

@app.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns:
        Service status and the number of stored mappings
    """
    app_settings = request.app.state.settings
    store = request.app.state.services.store

    try:
        store_status = {"status": "healthy", "mappings": store.count()}
    except AppError as e:
        store_status = {"status": "unhealthy", "error": e.message}

    return {
        "status": "healthy" if store_status["status"] == "healthy" else "degraded",
        "timestamp": format_timestamp(utc_now()),
        "environment": app_settings.environment,
        "store": store_status
    }


# ===================
# INCLUDE ROUTERS
# ===================
from routes.data import router as data_router
from routes.logs import router as logs_router
from routes.static import router as static_router

app.include_router(data_router, tags=["Data"])
app.include_router(logs_router, tags=["Logs"])
app.include_router(static_router)  # Must stay last: catches /{filename}


if __name__ == "__main__":
    import uvicorn
    # uvicorn stops accepting connections on SIGINT/SIGTERM, lets in-flight
    # requests finish, then runs the lifespan shutdown
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
