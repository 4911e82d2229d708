"""Account endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from mybudget.api.deps import get_account_service, get_token_authority
from mybudget.api.schemas.account import (
    AccountCreate as AccountCreateSchema,
    AccountUpdate as AccountUpdateSchema,
    AccountResponse,
)
from mybudget.core.exceptions import NotFoundError, UnauthorizedError
from mybudget.core.security import TokenAuthority
from mybudget.services import AccountService, AccountCreate, AccountUpdate

router = APIRouter(tags=["accounts"])


@router.get("/{client_id}/accounts", response_model=list[AccountResponse])
def list_client_accounts(
    client_id: int,
    request: Request,
    service: AccountService = Depends(get_account_service),
    token_authority: TokenAuthority = Depends(get_token_authority),
):
    """List one client's accounts. Requires a bearer token; 401 with no body otherwise."""
    token = token_authority.extract_token(request.headers)
    try:
        accounts = service.list_client_accounts(client_id, token)
    except UnauthorizedError:
        return Response(status_code=401)
    return [AccountResponse.model_validate(a) for a in accounts]


@router.get("/accounts", response_model=list[AccountResponse])
def list_accounts(service: AccountService = Depends(get_account_service)):
    """List every account."""
    return [AccountResponse.model_validate(a) for a in service.list_accounts()]


@router.get("/account/{account_id}", response_model=Optional[AccountResponse])
def get_account(account_id: int, service: AccountService = Depends(get_account_service)):
    """Get one account. An unknown id yields 200 with a null body."""
    account = service.get_account(account_id)
    return AccountResponse.model_validate(account) if account else None


@router.post("/account", response_model=AccountResponse, status_code=201)
def create_account(data: AccountCreateSchema, service: AccountService = Depends(get_account_service)):
    """Create a new account."""
    account = service.create_account(
        AccountCreate(name=data.name, bank=data.bank, client_id=data.client_id)
    )
    return AccountResponse.model_validate(account)


@router.patch("/account/{account_id}", response_model=Optional[AccountResponse])
def update_account(
    account_id: int,
    data: AccountUpdateSchema,
    service: AccountService = Depends(get_account_service),
):
    """Overwrite name, bank and clientId. An unknown id yields 200 with a null body."""
    account = service.update_account(
        account_id,
        AccountUpdate(name=data.name, bank=data.bank, client_id=data.client_id),
    )
    return AccountResponse.model_validate(account) if account else None


@router.delete("/account/{account_id}", status_code=204)
def delete_account(account_id: int, service: AccountService = Depends(get_account_service)):
    """Delete an account. 404 with no body when it does not exist."""
    try:
        service.delete_account(account_id)
    except NotFoundError:
        return Response(status_code=404)
    return Response(status_code=204)
