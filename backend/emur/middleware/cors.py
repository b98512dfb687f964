"""
CORS Middleware Configuration
Enables Cross-Origin Resource Sharing for the mobile and web clients.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from emur.core.config import Settings


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """
    Configure CORS middleware for the FastAPI application.

    Origins come from CORS_ORIGINS (comma separated, "*" by default).
    Credentials are only allowed when origins are listed explicitly.
    """
    origins = settings.cors_origins or ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],  # Content-Type, Authorization...
    )
