"""
Main FastAPI Application
Entry point for the emur API.

This module creates and configures the FastAPI application instance,
sets up middleware and exception handlers, and defines the health check
endpoint.

Run with:
    uvicorn emur.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from emur import __version__
from emur.api.v1.router import api_router
from emur.core.config import Settings, get_settings
from emur.core.security import configure_field_encryption
from emur.db.base import Base
from emur.db.seed import seed_roles
from emur.db.session import SessionLocal, engine
from emur.middleware.cors import setup_cors
from emur.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers
from emur.services.error_logging import configure_error_logging, configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """
    Build the FastAPI application.

    Configuration:
    - docs_url/redoc_url: disabled when ENVIRONMENT=production
    - CORS, exception handlers and the error middleware are installed here
    - All v1 endpoints are mounted under /api/{API_VERSION}
    """
    configure_logging(settings)
    configure_field_encryption(settings.encryption_secret)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=__version__,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        description="""
    Emur API - community health support REST API.

    Features:
    - JWT authentication with user and admin roles
    - Symptoms, monitorings, treatments and medical records
    - Articles, recipes and community questions
    - Reminders with image attachments
    - Medical registry, health services and map locations
    - Weather forecasts for the users' locations
    """,
    )

    # Setup CORS middleware
    setup_cors(app, settings)

    # Domain and validation errors -> {code, message, data}
    register_exception_handlers(app)

    # Catches all unhandled exceptions and logs them
    app.add_middleware(ErrorHandlerMiddleware)

    @app.on_event("startup")
    def startup_event():
        """
        Application startup handler.

        Tasks performed:
        - Create all database tables if they don't exist
        - Seed the role catalog
        - Configure the error logging system

        Note: In production, use migrations instead of
        Base.metadata.create_all() for better schema management.
        """
        Base.metadata.create_all(bind=engine)
        logger.info("[Startup] Database tables created/verified")

        db = SessionLocal()
        try:
            inserted = seed_roles(db)
            if inserted:
                logger.info(f"[Startup] Roles seeded: {inserted}")
        finally:
            db.close()

        configure_error_logging(SessionLocal)
        logger.info("[Startup] Error logging system configured")

    @app.on_event("shutdown")
    def shutdown_event():
        logger.info("[Shutdown] Application shutdown complete")

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health Check",
        description="Simple endpoint to verify API is running",
    )
    def health_check():
        """
        Health check endpoint.

        Example Response:
            {
                "status": "ok",
                "version": "1.0.0",
                "api": "Emur API"
            }
        """
        return JSONResponse(
            status_code=200,
            content={
                "status": "ok",
                "version": __version__,
                "api": settings.PROJECT_NAME,
            },
        )

    @app.get("/", tags=["Root"], summary="API Root")
    def root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": __version__,
            "docs": app.docs_url,
            "health": "/health",
        }

    # Include API v1 router
    # All v1 endpoints are prefixed with /api/v1
    app.include_router(api_router, prefix=f"/api/{settings.API_VERSION}")

    return app


app = create_app(get_settings())
