"""
Main FastAPI application.

This file wires together all layers:
- Domain: FAQ entity and errors
- Search: Relevance engine
- Repositories: FAQ store
- Services: Search orchestration
- Routers: HTTP endpoints
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .dependencies import set_search_service
from .domain.exceptions import FAQNotFoundException, FAQServiceException, ValidationException
from .logging_config import setup_logging
from .metrics import (
    faq_corpus_size,
    http_request_duration_seconds,
    http_requests_total,
    metrics_endpoint,
)
from .repositories.faq_repository import IFAQRepository, InMemoryFAQRepository
from .routers import faqs_router, health_router, search_router
from .search.engine import RelevanceEngine
from .services.faq_search_service import FAQSearchService

logger = structlog.get_logger(__name__)


UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """Route template for metric labels, so path parameters share one series."""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ENDPOINT)


def build_repository(config: Settings) -> IFAQRepository:
    """Create the FAQ store, seeded from FAQ_SEED_FILE when configured."""
    if config.FAQ_SEED_FILE:
        return InMemoryFAQRepository.load_from_file(config.FAQ_SEED_FILE)
    return InMemoryFAQRepository()


def create_app(
    config: Optional[Settings] = None, repository: Optional[IFAQRepository] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use (defaults to the global settings)
        repository: FAQ store to serve (built from config when omitted)

    Returns:
        Configured FastAPI instance
    """
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        setup_logging(config.LOG_LEVEL, config.LOG_JSON)
        logger.info("Starting FAQ search service", version=config.VERSION)

        try:
            store = repository or build_repository(config)
        except FAQServiceException as e:
            logger.error("Failed to load FAQ store", error=e.message, **e.details)
            raise

        engine = RelevanceEngine()
        service = FAQSearchService(store, engine, config)
        set_search_service(service)

        faq_count = await store.count()
        faq_corpus_size.set(faq_count)
        logger.info("FAQ search service started", faq_count=faq_count)

        yield

        set_search_service(None)
        logger.info("FAQ search service shut down complete")

    app = FastAPI(
        title=config.APP_NAME,
        description="FAQ relevance search with TF-IDF ranking, fuzzy matching and suggestions",
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Add request ID for request tracing."""
        request_id = request.headers.get("X-Request-ID", f"req-{id(request)}")
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["X-Request-ID"] = request_id
        return response

    @app.middleware("http")
    async def track_metrics(request: Request, call_next):
        """Track Prometheus metrics."""
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        endpoint = endpoint_label(request)

        http_requests_total.labels(
            method=request.method, endpoint=endpoint, status=response.status_code
        ).inc()
        http_request_duration_seconds.labels(
            method=request.method, endpoint=endpoint
        ).observe(duration)
        return response

    app.include_router(search_router.router)
    app.include_router(faqs_router.router)
    app.include_router(health_router.router)
    app.add_api_route("/metrics", metrics_endpoint, methods=["GET"], include_in_schema=False)

    @app.get("/")
    async def root():
        """Root endpoint with service information."""
        return {
            "service": config.APP_NAME,
            "version": config.VERSION,
            "status": "operational",
            "docs": "/api/docs",
            "health": "/api/v1/health",
            "search": "/api/v1/search",
            "faqs": "/api/v1/faqs",
        }

    @app.exception_handler(FAQServiceException)
    async def domain_exception_handler(request: Request, exc: FAQServiceException):
        """Translate domain errors that escape the routers."""
        if isinstance(exc, FAQNotFoundException):
            status_code, error = status.HTTP_404_NOT_FOUND, "not_found"
        elif isinstance(exc, ValidationException):
            status_code, error = status.HTTP_400_BAD_REQUEST, "validation_error"
        else:
            status_code, error = status.HTTP_500_INTERNAL_SERVER_ERROR, "data_error"

        logger.warning("Domain error", path=request.url.path, error=exc.message)
        return JSONResponse(
            status_code=status_code,
            content={
                "success": False,
                "error": error,
                "message": exc.message,
                "details": exc.details,
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": "internal_server_error",
                "message": "An unexpected error occurred",
                "request_id": request.headers.get("X-Request-ID"),
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "faq_service.app:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
