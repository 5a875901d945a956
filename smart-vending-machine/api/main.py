"""
Smart Vending Machine API - Main Application.

FastAPI application exposing one vending machine over HTTP, with CORS enabled
for frontend communication.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.routers import products, purchases
from config.settings import Settings, load_settings
from services.vending_service import VendingService


def create_app(service: Optional[VendingService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around a vending service.

    Args:
        service: Service to expose (a fresh machine is created when omitted)
        settings: Settings to use (loaded from the environment when omitted)
    """
    settings = settings or load_settings()
    service = service or VendingService(machine_id=settings.machine_id)

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Smart Vending Machine API",
        description="REST API for stocking a vending machine and buying its products",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.vending_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Health"])
    def health_check():
        """
        Health check endpoint.

        Returns the API status and version.
        """
        return {
            "status": "healthy",
            "version": __version__,
            "service": "smart-vending-machine-api",
            "machine_id": settings.machine_id,
        }

    @app.get("/", tags=["Root"])
    def root():
        """
        Root endpoint with API information.
        """
        return {
            "message": "Smart Vending Machine API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health"
        }

    app.include_router(products.router, prefix="/api/v1", tags=["Products"])
    app.include_router(purchases.router, prefix="/api/v1", tags=["Purchases"])

    return app


app = create_app()
