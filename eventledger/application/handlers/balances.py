"""Balance queries and snapshot creation."""

from __future__ import annotations

import logging
from typing import Sequence

from eventledger.application.commands import CreateBalanceSnapshotCommand
from eventledger.application.queries import GetAccountBalanceQuery, ListBalanceSnapshotsQuery
from eventledger.domain.balances import AccountBalance, AccountBalanceRepository
from eventledger.domain.common import Money
from eventledger.domain.errors import InvalidAmountError, ValidationError
from eventledger.domain.ledger import LedgerEventRepository

logger = logging.getLogger(__name__)


class GetAccountBalanceHandler:
    def __init__(
        self,
        event_repository: LedgerEventRepository,
        balance_repository: AccountBalanceRepository,
    ) -> None:
        self._events = event_repository
        self._balances = balance_repository

    async def handle(self, query: GetAccountBalanceQuery) -> AccountBalance:
        """Return the latest snapshot if asked for and present, else a live balance.

        A snapshot is served as stored, even when newer events exist. The live
        result is not persisted and has neither ``id`` nor ``snapshot_at``.
        """
        logger.info(
            "Getting account balance: account_id=%s, use_snapshot=%s",
            query.account_id,
            query.use_snapshot,
        )

        if query.use_snapshot:
            snapshot = await self._balances.find_latest_by_account_id(query.account_id)
            if snapshot is not None:
                logger.info("Using balance snapshot: balance=%s", snapshot.balance)
                return snapshot

        value = await self._events.calculate_balance(query.account_id)
        logger.info("Calculated balance from events: balance=%s", value)

        try:
            balance = Money(value)
        except InvalidAmountError as exc:
            raise ValidationError(f"Invalid balance: {exc}") from exc
        return AccountBalance(account_id=query.account_id, balance=balance)


class CreateBalanceSnapshotHandler:
    def __init__(
        self,
        event_repository: LedgerEventRepository,
        balance_repository: AccountBalanceRepository,
    ) -> None:
        self._events = event_repository
        self._balances = balance_repository

    async def handle(self, command: CreateBalanceSnapshotCommand) -> AccountBalance:
        logger.info("Creating balance snapshot for account_id=%s", command.account_id)

        # Always replayed from events; earlier snapshots are neither read nor replaced.
        value = await self._events.calculate_balance(command.account_id)
        snapshot = AccountBalance(account_id=command.account_id, balance=Money(value))

        saved = await self._balances.save(snapshot)
        logger.info(
            "Balance snapshot created successfully: id=%s, balance=%s",
            saved.id,
            saved.balance,
        )
        return saved


class ListBalanceSnapshotsHandler:
    def __init__(self, balance_repository: AccountBalanceRepository) -> None:
        self._balances = balance_repository

    async def handle(self, query: ListBalanceSnapshotsQuery) -> Sequence[AccountBalance]:
        logger.info("Listing balance snapshots: account_id=%s", query.account_id)
        return await self._balances.find_all_by_account_id(query.account_id)
