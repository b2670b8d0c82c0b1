"""
FastAPI Application

Main entry point for the movie/weather API.
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from .movies import router as movies_router
from .weather import router as weather_router
from .models import HealthResponse, ErrorResponse
from ..config.settings import Settings, get_settings
from ..config.logging import (
    get_logger,
    log_api_request,
    log_error,
    request_id_var,
    setup_logging_from_settings,
)

logger = get_logger("api")

SERVICE_NAME = "todo-app"
VERSION = "1.0.0"


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every incoming HTTP request with method, path, status and duration.
    Sets X-Request-ID for log correlation across the request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        req_id = uuid.uuid4().hex[:8]
        request.state.request_id = req_id
        token = request_id_var.set(req_id)

        try:
            start = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as exc:
                # Handled here so the request id is still bound and the header set
                log_error(
                    logger, exc,
                    context=f"{request.method} {request.url.path}",
                    request_id=req_id,
                )
                response = JSONResponse(
                    status_code=500,
                    content=ErrorResponse(error=str(exc)).model_dump(),
                )
            duration_ms = round((time.perf_counter() - start) * 1000, 1)

            response.headers["X-Request-ID"] = req_id

            log_api_request(
                logger,
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                request_id=req_id,
            )
            return response
        finally:
            request_id_var.reset(token)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    settings: Settings = app.state.settings
    logger.info(
        "API starting (env=%s, docs=%s)",
        settings.app_env,
        settings.is_development,
        extra={"extra_data": {"cors_origins": settings.api.cors_origins}},
    )
    yield
    logger.info("API stopped")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create FastAPI application."""
    settings = settings or get_settings()
    setup_logging_from_settings(settings)

    # OpenAPI document and Swagger UI only in development
    docs_enabled = settings.is_development

    app = FastAPI(
        title="Movie Web API",
        description="Static movie catalog and random weather forecasts",
        version=VERSION,
        lifespan=lifespan,
        openapi_url="/openapi/v1.json" if docs_enabled else None,
        docs_url="/swagger" if docs_enabled else None,
        redoc_url=None,
    )
    app.state.settings = settings

    if settings.api.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging is outermost: added last, runs first
    app.add_middleware(RequestLoggingMiddleware)

    # Routers
    app.include_router(movies_router)
    app.include_router(weather_router)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", service=SERVICE_NAME)

    @app.get("/")
    async def root():
        return {
            "name": SERVICE_NAME,
            "version": VERSION,
            "endpoints": {
                "movies": "/movies",
                "movie": "/movies/{id}",
                "weather": "/weatherforecast",
            },
        }

    # Fallback for errors raised outside RequestLoggingMiddleware
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        log_error(logger, exc, context=f"{request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )

    return app


# Create app instance
app = create_app()
