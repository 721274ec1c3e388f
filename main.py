# main.py - M-Pulse Coordination API
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import time
import structlog
from datetime import datetime

from config import Settings, settings as default_settings
from services.agent_orchestrator import AgentOrchestrator, create_orchestrator
from services.environment_data import EnvironmentalDataService
from utils.logging_setup import LoggingMiddleware, configure_logging

# Import Routers
from routers import alerts, civic, forecast, logistics, system

logger = structlog.get_logger(__name__)


# --- Lifespan Event Handler ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    settings: Settings = app.state.settings
    logger.info("Starting M-Pulse Coordination API", version=settings.api_version)
    app.state.start_time = time.time()

    owned_source = None
    if getattr(app.state, "orchestrator", None) is None:
        owned_source = EnvironmentalDataService(settings=settings)
        app.state.orchestrator = create_orchestrator(settings=settings, source=owned_source)
        logger.info("Coordination agents initialized")

    yield

    logger.info("Shutting down M-Pulse Coordination API")
    if owned_source is not None:
        try:
            await owned_source.close()
        except Exception as e:
            logger.error("Error closing environmental data client", error=str(e))


def create_app(settings: Optional[Settings] = None,
               orchestrator: Optional[AgentOrchestrator] = None) -> FastAPI:
    """Build the API; a prebuilt orchestrator replaces the one made at startup"""
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.orchestrator = orchestrator

    # --- Middleware Setup ---
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )

    # --- Include Routers ---
    app.include_router(civic.router)
    app.include_router(forecast.router)
    app.include_router(logistics.router)
    app.include_router(alerts.router)
    app.include_router(system.router)

    # --- Exception Handlers ---
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception", error=str(exc), path=request.url.path, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": "An unexpected error occurred" if not settings.debug else str(exc),
                "timestamp": datetime.now().isoformat()
            }
        )

    @app.get("/", summary="API Information", tags=["General"])
    async def root():
        """Get basic API information"""
        return {
            "message": "M-Pulse - Civic Health Coordination Core",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
            "api": {
                "civic": "/api/v1/civic",
                "forecast": "/api/v1/forecast",
                "logistics": "/api/v1/logistics",
                "alerts": "/api/v1/alerts",
                "system": "/api/v1/system"
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=default_settings.debug)
