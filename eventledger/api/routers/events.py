"""Ledger event endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from eventledger.api.deps import get_mediator
from eventledger.api.schemas import (
    CreateLedgerEventRequest,
    LedgerEventListResponse,
    LedgerEventResponse,
)
from eventledger.application import Mediator
from eventledger.application.commands import CreateLedgerEventCommand
from eventledger.application.queries import GetLedgerEventQuery, ListLedgerEventsQuery
from eventledger.domain.ledger import LedgerEvent

router = APIRouter()


def _to_schema(event: LedgerEvent) -> LedgerEventResponse:
    return LedgerEventResponse(
        id=event.id,
        account_id=event.account_id,
        event_type=str(event.event_type),
        amount=event.amount.value,
        description=event.description,
        created_at=event.created_at,
    )


@router.post("", response_model=LedgerEventResponse, status_code=201, summary="Append ledger event")
async def create_ledger_event(payload: CreateLedgerEventRequest, mediator: Mediator = Depends(get_mediator)):
    event = await mediator.create_ledger_event(
        CreateLedgerEventCommand(
            account_id=payload.account_id,
            event_type=payload.event_type,
            amount=payload.amount,
            description=payload.description,
        )
    )
    return _to_schema(event)


@router.get("", response_model=LedgerEventListResponse, summary="List ledger events")
async def list_ledger_events(account_id: Optional[int] = None, mediator: Mediator = Depends(get_mediator)):
    events = await mediator.list_ledger_events(ListLedgerEventsQuery(account_id=account_id))
    return LedgerEventListResponse(events=[_to_schema(event) for event in events], count=len(events))


@router.get("/{event_id}", response_model=LedgerEventResponse, summary="Get ledger event")
async def get_ledger_event(event_id: int, mediator: Mediator = Depends(get_mediator)):
    event = await mediator.get_ledger_event(GetLedgerEventQuery(event_id))
    return _to_schema(event)
