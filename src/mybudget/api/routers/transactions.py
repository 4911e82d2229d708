"""Transaction endpoints."""

from fastapi import APIRouter, Depends, Response

from mybudget.api.deps import get_transaction_service
from mybudget.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
)
from mybudget.services import TransactionService, TransactionCreate, TransactionUpdate

router = APIRouter(tags=["transactions"])


@router.get("/{account_id}/transactions", response_model=list[TransactionResponse])
def list_account_transactions(
    account_id: int,
    service: TransactionService = Depends(get_transaction_service),
):
    """List the transactions booked against an account id."""
    return [TransactionResponse.model_validate(t) for t in service.list_by_account(account_id)]


@router.get("/transaction/{txn_id}", response_model=TransactionResponse)
def get_transaction(txn_id: int, service: TransactionService = Depends(get_transaction_service)):
    """Get one transaction."""
    return TransactionResponse.model_validate(service.get_transaction(txn_id))


@router.post("/transaction", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreateRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    """Create a transaction. Rule violations come back as 401 with the rule message."""
    created = service.create_transaction(
        TransactionCreate(
            subject=data.subject,
            category=data.category,
            amount=data.amount,
            account_id=data.account_id,
            note=data.note,
        )
    )
    return TransactionResponse.model_validate(created)


@router.patch("/transaction/{txn_id}", response_model=TransactionResponse)
def update_transaction(
    txn_id: int,
    data: TransactionUpdateRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    """Overwrite every field of a transaction."""
    updated = service.update_transaction(
        txn_id,
        TransactionUpdate(
            subject=data.subject,
            category=data.category,
            amount=data.amount,
            account_id=data.account_id,
            note=data.note,
        ),
    )
    return TransactionResponse.model_validate(updated)


@router.delete("/transaction/{txn_id}", status_code=204)
def delete_transaction(txn_id: int, service: TransactionService = Depends(get_transaction_service)):
    """Delete a transaction."""
    service.delete_transaction(txn_id)
    return Response(status_code=204)
