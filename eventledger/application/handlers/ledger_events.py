"""Ledger event use cases."""

from __future__ import annotations

import logging
from typing import Sequence

from eventledger.application.commands import CreateLedgerEventCommand
from eventledger.application.queries import GetLedgerEventQuery, ListLedgerEventsQuery
from eventledger.domain.common import Money
from eventledger.domain.ledger import EventType, LedgerEvent, LedgerEventRepository

logger = logging.getLogger(__name__)


class CreateLedgerEventHandler:
    """Append a debit or credit to an account's history.

    Input is parsed into value objects and the event is validated before the
    repository is touched. Whether ``account_id`` refers to an existing
    account is left to the store's foreign key.
    """

    def __init__(self, event_repository: LedgerEventRepository) -> None:
        self._events = event_repository

    async def handle(self, command: CreateLedgerEventCommand) -> LedgerEvent:
        logger.info(
            "Creating ledger event: account_id=%s, type=%s, amount=%s",
            command.account_id,
            command.event_type,
            command.amount,
        )
        event_type = EventType.from_string(command.event_type)
        amount = Money(command.amount)

        event = LedgerEvent(
            account_id=command.account_id,
            event_type=event_type,
            amount=amount,
            description=command.description,
        )
        event.validate()

        saved = await self._events.save(event)
        logger.info("Ledger event created successfully: id=%s", saved.id)
        return saved


class GetLedgerEventHandler:
    def __init__(self, event_repository: LedgerEventRepository) -> None:
        self._events = event_repository

    async def handle(self, query: GetLedgerEventQuery) -> LedgerEvent:
        logger.info("Getting ledger event: id=%s", query.event_id)
        return await self._events.find_by_id(query.event_id)


class ListLedgerEventsHandler:
    def __init__(self, event_repository: LedgerEventRepository) -> None:
        self._events = event_repository

    async def handle(self, query: ListLedgerEventsQuery) -> Sequence[LedgerEvent]:
        logger.info("Listing ledger events: account_id=%s", query.account_id)
        if query.account_id is not None:
            events = await self._events.find_by_account_id(query.account_id)
        else:
            events = await self._events.find_all()
        logger.info("Found %d ledger events", len(events))
        return events
