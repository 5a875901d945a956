"""
Purchases API Endpoints.

Endpoints for inserting money, buying products, returning change and reading
the transaction log.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_settings, get_vending_service, to_http_exception
from api.models import (
    error_responses,
    BalanceResponse,
    ChangeResponse,
    InsertMoneyRequest,
    PurchaseRequest,
    TransactionListResponse,
    TransactionResponse,
)
from config.settings import Settings
from domain.errors import VendingError
from services.vending_service import VendingService

router = APIRouter()


@router.get(
    "/balance",
    response_model=BalanceResponse,
    summary="Current Balance"
)
def get_balance(
    service: VendingService = Depends(get_vending_service),
    settings: Settings = Depends(get_settings),
):
    return BalanceResponse(balance=service.get_balance(), currency=settings.currency)


@router.post(
    "/balance",
    response_model=BalanceResponse,
    summary="Insert Money",
    responses=error_responses(400, 500),
    description="Add money to the balance. Repeated insertions accumulate."
)
def insert_money(
    request: InsertMoneyRequest,
    service: VendingService = Depends(get_vending_service),
    settings: Settings = Depends(get_settings),
):
    try:
        balance = service.insert_money(request.amount)
        return BalanceResponse(balance=balance, currency=settings.currency)
    except VendingError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to insert money: {str(e)}")


@router.post(
    "/purchases",
    response_model=TransactionResponse,
    summary="Buy Product",
    responses=error_responses(400, 404, 409, 500),
    description="Buy one unit of a product with the current balance."
)
def purchase_product(
    request: PurchaseRequest,
    service: VendingService = Depends(get_vending_service),
    settings: Settings = Depends(get_settings),
):
    """
    Buy a product.

    **Process:**
    1. Rejects a blank product name (400)
    2. Rejects an unknown product (404)
    3. Rejects a product with no stock left (409)
    4. Rejects a balance below the price (409)
    5. Takes one unit out of stock, records the transaction and resets the balance to 0

    The difference between the balance and the price is reported as `change_given`.

    **Success response:**
    ```json
    {
      "product_name": "A1",
      "amount_paid": 2.5,
      "change_given": 2.5,
      "total_amount_inserted": 5.0,
      "has_change": true,
      "timestamp": "2025-01-01T12:00:00Z",
      "currency": "USD"
    }
    ```
    """
    try:
        transaction = service.select_product(request.product_name)
        return TransactionResponse.from_transaction(transaction, currency=settings.currency)
    except VendingError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to execute purchase: {str(e)}")


@router.post(
    "/change",
    response_model=ChangeResponse,
    summary="Return Change",
    description="Return the whole balance without buying anything."
)
def return_change(
    service: VendingService = Depends(get_vending_service),
    settings: Settings = Depends(get_settings),
):
    return ChangeResponse(change=service.get_change(), currency=settings.currency)


@router.get(
    "/transactions",
    response_model=TransactionListResponse,
    summary="Transaction History",
    description="Completed purchases, oldest first."
)
def transaction_history(
    service: VendingService = Depends(get_vending_service),
    settings: Settings = Depends(get_settings),
):
    items = [
        TransactionResponse.from_transaction(transaction, currency=settings.currency)
        for transaction in service.get_transaction_history()
    ]
    return TransactionListResponse(items=items, total_count=len(items))
