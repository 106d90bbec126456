"""Account endpoints."""

from fastapi import APIRouter, Depends

from eventledger.api.deps import get_mediator
from eventledger.api.schemas import (
    AccountBalanceResponse,
    AccountListResponse,
    AccountResponse,
    BalanceSnapshotListResponse,
    CreateAccountRequest,
)
from eventledger.application import Mediator
from eventledger.application.commands import CreateAccountCommand
from eventledger.application.queries import (
    GetAccountBalanceQuery,
    GetAccountByNumberQuery,
    GetAccountQuery,
    ListAccountsQuery,
    ListBalanceSnapshotsQuery,
)
from eventledger.domain.accounts import Account
from eventledger.domain.balances import AccountBalance

router = APIRouter()


def _to_schema(account: Account) -> AccountResponse:
    return AccountResponse(
        id=account.id,
        account_number=account.account_number.value,
        account_name=account.account_name,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


def balance_to_schema(balance: AccountBalance) -> AccountBalanceResponse:
    return AccountBalanceResponse(
        id=balance.id,
        account_id=balance.account_id,
        balance=balance.balance.value,
        snapshot_at=balance.snapshot_at,
    )


@router.post("", response_model=AccountResponse, status_code=201, summary="Create account")
async def create_account(payload: CreateAccountRequest, mediator: Mediator = Depends(get_mediator)):
    account = await mediator.create_account(
        CreateAccountCommand(account_number=payload.account_number, account_name=payload.account_name)
    )
    return _to_schema(account)


@router.get("", response_model=AccountListResponse, summary="List accounts")
async def list_accounts(mediator: Mediator = Depends(get_mediator)):
    accounts = await mediator.list_accounts(ListAccountsQuery())
    return AccountListResponse(accounts=[_to_schema(account) for account in accounts], count=len(accounts))


@router.get("/by-number/{account_number}", response_model=AccountResponse, summary="Get account by number")
async def get_account_by_number(account_number: str, mediator: Mediator = Depends(get_mediator)):
    account = await mediator.get_account_by_number(GetAccountByNumberQuery(account_number))
    return _to_schema(account)


@router.get("/{account_id}", response_model=AccountResponse, summary="Get account")
async def get_account(account_id: int, mediator: Mediator = Depends(get_mediator)):
    account = await mediator.get_account(GetAccountQuery(account_id))
    return _to_schema(account)


@router.get("/{account_id}/balance", response_model=AccountBalanceResponse, summary="Get account balance")
async def get_account_balance(
    account_id: int,
    use_snapshot: bool = False,
    mediator: Mediator = Depends(get_mediator),
):
    balance = await mediator.get_account_balance(
        GetAccountBalanceQuery(account_id=account_id, use_snapshot=use_snapshot)
    )
    return balance_to_schema(balance)


@router.get("/{account_id}/snapshots", response_model=BalanceSnapshotListResponse, summary="List balance snapshots")
async def list_balance_snapshots(account_id: int, mediator: Mediator = Depends(get_mediator)):
    snapshots = await mediator.list_balance_snapshots(ListBalanceSnapshotsQuery(account_id))
    return BalanceSnapshotListResponse(
        snapshots=[balance_to_schema(snapshot) for snapshot in snapshots],
        count=len(snapshots),
    )
