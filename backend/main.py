"""
Operations Dashboard - Main Application Entry Point

Milestone calendar and todo tracker backend.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from opsboard.core.config import get_settings
from opsboard.core.exceptions import InfrastructureError
from opsboard.core.logger import logger, setup_logging

VERSION = "0.1.0"

# Location prefixes FastAPI adds in front of the field name
_LOCATION_PARTS = {"body", "query", "path"}


def describe_validation_errors(errors: list[dict]) -> str:
    """Turn FastAPI validation errors into one user-displayable message."""
    messages = []
    for error in errors:
        parts = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PARTS]
        field = ".".join(parts) or "request body"
        if error.get("type") == "missing" or error.get("input", ...) is None:
            messages.append(f"{field} is required")
        else:
            messages.append(f"{field}: {error.get('msg')}")
    return "; ".join(messages)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    settings = get_settings()
    setup_logging()
    logger.info(f"Starting Operations Dashboard in {settings.ENVIRONMENT} mode...")

    if settings.is_local:
        from opsboard.infrastructure.local.database import init_db

        await init_db()

    yield

    # Shutdown
    logger.info("Shutting down Operations Dashboard...")
    from opsboard.infrastructure.local.database import get_engine

    await get_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Operations Dashboard",
        description="Program calendar plus milestone and todo tracker",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": describe_validation_errors(exc.errors())},
        )

    @app.exception_handler(InfrastructureError)
    async def infrastructure_exception_handler(request: Request, exc: InfrastructureError):
        # Already logged with the traceback where it was raised
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.message},
        )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    from opsboard.api import dashboard, milestones, todos

    app.include_router(milestones.router, prefix="/api")
    app.include_router(todos.router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": VERSION,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
