"""FastAPI application entry point."""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.config import Settings, get_settings
from biztime.exceptions import NotFoundError, StoreError
from biztime.routers import (
    health_router,
    companies_router,
    industries_router,
    invoices_router,
)
from biztime.services import LedgerStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Route stdlib and structlog output through one handler."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    settings: Settings = app.state.settings
    store: LedgerStore = app.state.store
    logger.info(f"Starting {settings.app_name} API...")
    store.connect()
    if settings.create_schema:
        store.create_schema()
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name} API...")
    if app.state.owns_store:
        store.disconnect()


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[LedgerStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    A store passed in is used as-is and left open at shutdown; otherwise
    one is built from ``settings.database_url`` and closed with the app.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## BizTime API

        Companies, the industries they belong to, and the invoices billed
        to them.

        ### Resources:
        - **Companies**: `/companies`
        - **Industries**: `/industries` (with company membership)
        - **Invoices**: `/invoices` and `/invoices/companies/{code}`
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    app.state.settings = settings
    app.state.owns_store = store is None
    app.state.store = store or LedgerStore(
        settings.database_url,
        echo=settings.database_echo or settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(companies_router)
    app.include_router(industries_router)
    app.include_router(invoices_router)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "resources": ["/companies", "/industries", "/invoices"],
        }

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(
            f"Store error on {request.method} {request.url.path} "
            f"({exc.kind.value}): {exc.message}"
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unmatched routes land here as 404 "Not Found"
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc)}
        )

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn
    uvicorn.run("biztime.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("biztime.main:app", host="0.0.0.0", port=8000, reload=True)
