"""Balance snapshot endpoints."""

from fastapi import APIRouter, Depends

from eventledger.api.deps import get_mediator
from eventledger.api.routers.accounts import balance_to_schema
from eventledger.api.schemas import AccountBalanceResponse, CreateBalanceSnapshotRequest
from eventledger.application import Mediator
from eventledger.application.commands import CreateBalanceSnapshotCommand

router = APIRouter()


@router.post("/snapshot", response_model=AccountBalanceResponse, status_code=201, summary="Create balance snapshot")
async def create_balance_snapshot(
    payload: CreateBalanceSnapshotRequest,
    mediator: Mediator = Depends(get_mediator),
):
    snapshot = await mediator.create_balance_snapshot(CreateBalanceSnapshotCommand(payload.account_id))
    return balance_to_schema(snapshot)
