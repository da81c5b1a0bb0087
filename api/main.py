"""
FastAPI main application.
"""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import (
    currencies_router,
    ratios_router,
    reports_router,
)
from api.schemas import ErrorResponse, HealthResponse
from config.settings import settings
from config.logging_config import setup_logging, get_logger
from engine.ratios import ValidationError
from report.renderers import RendererRegistry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    logger.info(
        f"Starting {settings.api_title} v{settings.api_version} "
        f"(formats: {', '.join(RendererRegistry.get_available())}, "
        f"default currency: {settings.default_currency})"
    )
    yield
    logger.info(f"Shutting down {settings.api_title}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=(
            "Balance-sheet ratio calculator. Computes current, quick, "
            "debt-to-equity and debt-to-assets ratios, classifies them and "
            "renders printable reports."
        ),
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The analyzer is stateless and cookie-free
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(
        ratios_router,
        prefix="/api/v1/ratios",
        tags=["Ratios"],
    )
    app.include_router(
        reports_router,
        prefix="/api/v1/reports",
        tags=["Reports"],
    )
    app.include_router(
        currencies_router,
        prefix="/api/v1/currencies",
        tags=["Currencies"],
    )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            version=settings.api_version,
        )

    @app.get("/", tags=["Root"])
    async def root():
        """API root endpoint."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
            "report_formats": RendererRegistry.get_available(),
            "timestamp": datetime.now().isoformat(),
        }

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        logger.warning(f"Rejected input on {request.url.path}: {', '.join(exc.fields)}")
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error=exc.message,
                detail=", ".join(exc.fields) or None,
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                detail=str(exc) if settings.log_level == "DEBUG" else None,
            ).model_dump(),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
