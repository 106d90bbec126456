"""Single dispatch point for ledger commands and queries."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from eventledger.domain.accounts import Account, AccountRepository
from eventledger.domain.balances import AccountBalance, AccountBalanceRepository
from eventledger.domain.ledger import LedgerEvent, LedgerEventRepository
from eventledger.infrastructure.database.repositories import (
    SqlAccountBalanceRepository,
    SqlAccountRepository,
    SqlLedgerEventRepository,
)

from .commands import (
    CreateAccountCommand,
    CreateBalanceSnapshotCommand,
    CreateLedgerEventCommand,
)
from .handlers import (
    CreateAccountHandler,
    CreateBalanceSnapshotHandler,
    CreateLedgerEventHandler,
    GetAccountBalanceHandler,
    GetAccountHandler,
    GetLedgerEventHandler,
    ListAccountsHandler,
    ListBalanceSnapshotsHandler,
    ListLedgerEventsHandler,
)
from .queries import (
    GetAccountBalanceQuery,
    GetAccountByNumberQuery,
    GetAccountQuery,
    GetLedgerEventQuery,
    ListAccountsQuery,
    ListBalanceSnapshotsQuery,
    ListLedgerEventsQuery,
)


class Mediator:
    """Routes each command or query to its handler.

    The handler set is fixed at construction; the mediator itself holds no
    state besides the handlers and applies no business rules.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        event_repository: LedgerEventRepository,
        balance_repository: AccountBalanceRepository,
    ) -> None:
        self._create_account = CreateAccountHandler(account_repository)
        self._get_account = GetAccountHandler(account_repository)
        self._list_accounts = ListAccountsHandler(account_repository)
        self._create_ledger_event = CreateLedgerEventHandler(event_repository)
        self._get_ledger_event = GetLedgerEventHandler(event_repository)
        self._list_ledger_events = ListLedgerEventsHandler(event_repository)
        self._get_account_balance = GetAccountBalanceHandler(event_repository, balance_repository)
        self._create_balance_snapshot = CreateBalanceSnapshotHandler(event_repository, balance_repository)
        self._list_balance_snapshots = ListBalanceSnapshotsHandler(balance_repository)

    @classmethod
    def with_session(cls, session: AsyncSession) -> "Mediator":
        return cls(
            SqlAccountRepository(session),
            SqlLedgerEventRepository(session),
            SqlAccountBalanceRepository(session),
        )

    # Commands

    async def create_account(self, command: CreateAccountCommand) -> Account:
        return await self._create_account.handle(command)

    async def create_ledger_event(self, command: CreateLedgerEventCommand) -> LedgerEvent:
        return await self._create_ledger_event.handle(command)

    async def create_balance_snapshot(self, command: CreateBalanceSnapshotCommand) -> AccountBalance:
        return await self._create_balance_snapshot.handle(command)

    # Queries

    async def get_account(self, query: GetAccountQuery) -> Account:
        return await self._get_account.handle(query)

    async def get_account_by_number(self, query: GetAccountByNumberQuery) -> Account:
        return await self._get_account.handle_by_number(query)

    async def list_accounts(self, query: ListAccountsQuery) -> Sequence[Account]:
        return await self._list_accounts.handle(query)

    async def get_account_balance(self, query: GetAccountBalanceQuery) -> AccountBalance:
        return await self._get_account_balance.handle(query)

    async def get_ledger_event(self, query: GetLedgerEventQuery) -> LedgerEvent:
        return await self._get_ledger_event.handle(query)

    async def list_ledger_events(self, query: ListLedgerEventsQuery) -> Sequence[LedgerEvent]:
        return await self._list_ledger_events.handle(query)

    async def list_balance_snapshots(self, query: ListBalanceSnapshotsQuery) -> Sequence[AccountBalance]:
        return await self._list_balance_snapshots.handle(query)
