"""
FastAPI dependencies.

The service and settings live on `app.state`, so each app built by
`create_app` owns its own vending machine.
"""

from fastapi import HTTPException, Request

from config.settings import Settings
from domain.errors import InvalidArgumentError, ProductNotFoundError, VendingError
from services.vending_service import VendingService


def get_vending_service(request: Request) -> VendingService:
    return request.app.state.vending_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def to_http_exception(error: VendingError) -> HTTPException:
    """Map a domain error to the HTTP status reported to the client."""

    if isinstance(error, InvalidArgumentError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, ProductNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    return HTTPException(status_code=409, detail=str(error))
