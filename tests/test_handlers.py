"""Tests for the command and query handlers against in-memory repositories."""

from __future__ import annotations

import pytest

from eventledger.application.commands import (
    CreateAccountCommand,
    CreateBalanceSnapshotCommand,
    CreateLedgerEventCommand,
)
from eventledger.application.handlers import (
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
from eventledger.application.queries import (
    GetAccountBalanceQuery,
    GetAccountByNumberQuery,
    GetAccountQuery,
    GetLedgerEventQuery,
    ListAccountsQuery,
    ListBalanceSnapshotsQuery,
    ListLedgerEventsQuery,
)
from eventledger.domain.balances import AccountBalance
from eventledger.domain.common import Money
from eventledger.domain.errors import (
    AccountNotFoundError,
    DuplicateAccountNumberError,
    InvalidAccountNumberError,
    InvalidAmountError,
    TransactionNotFoundError,
    ValidationError,
)
from eventledger.domain.ledger import EventType

from tests.fakes import (
    InMemoryAccountBalanceRepository,
    InMemoryAccountRepository,
    InMemoryLedgerEventRepository,
)


async def _record(events: InMemoryLedgerEventRepository, *commands: CreateLedgerEventCommand) -> None:
    handler = CreateLedgerEventHandler(events)
    for command in commands:
        await handler.handle(command)


class TestCreateAccountHandler:
    async def test_creates_account(self, account_repo: InMemoryAccountRepository) -> None:
        handler = CreateAccountHandler(account_repo)

        account = await handler.handle(CreateAccountCommand("ACC001", "Test Account"))

        assert account.id == 1
        assert account.account_number.value == "ACC001"
        assert account.account_name == "Test Account"
        assert account.created_at is not None
        assert account_repo.calls == ["exists_by_account_number", "save"]

    async def test_duplicate_number_rejected(self, account_repo: InMemoryAccountRepository) -> None:
        handler = CreateAccountHandler(account_repo)
        await handler.handle(CreateAccountCommand("ACC001", "First"))

        with pytest.raises(DuplicateAccountNumberError) as exc_info:
            await handler.handle(CreateAccountCommand("ACC001", "Second"))

        assert exc_info.value.account_number == "ACC001"
        assert account_repo.calls.count("save") == 1

    @pytest.mark.parametrize("number", ["", "X" * 51])
    async def test_invalid_number_fails_before_repository(
        self, account_repo: InMemoryAccountRepository, number: str
    ) -> None:
        handler = CreateAccountHandler(account_repo)

        with pytest.raises(InvalidAccountNumberError):
            await handler.handle(CreateAccountCommand(number, "Name"))

        assert account_repo.calls == []

    async def test_empty_name_is_not_saved(self, account_repo: InMemoryAccountRepository) -> None:
        handler = CreateAccountHandler(account_repo)

        with pytest.raises(ValidationError):
            await handler.handle(CreateAccountCommand("ACC001", ""))

        assert "save" not in account_repo.calls


class TestAccountQueries:
    async def test_get_by_id(self, account_repo: InMemoryAccountRepository) -> None:
        created = await CreateAccountHandler(account_repo).handle(CreateAccountCommand("ACC001", "Test"))

        found = await GetAccountHandler(account_repo).handle(GetAccountQuery(created.id))

        assert found == created

    async def test_get_missing_account(self, account_repo: InMemoryAccountRepository) -> None:
        with pytest.raises(AccountNotFoundError):
            await GetAccountHandler(account_repo).handle(GetAccountQuery(99))

    async def test_get_by_number(self, account_repo: InMemoryAccountRepository) -> None:
        created = await CreateAccountHandler(account_repo).handle(CreateAccountCommand("ACC001", "Test"))

        found = await GetAccountHandler(account_repo).handle_by_number(GetAccountByNumberQuery("ACC001"))

        assert found.id == created.id

    async def test_get_by_invalid_number(self, account_repo: InMemoryAccountRepository) -> None:
        with pytest.raises(InvalidAccountNumberError):
            await GetAccountHandler(account_repo).handle_by_number(GetAccountByNumberQuery(""))
        assert account_repo.calls == []

    async def test_list(self, account_repo: InMemoryAccountRepository) -> None:
        create = CreateAccountHandler(account_repo)
        await create.handle(CreateAccountCommand("ACC001", "One"))
        await create.handle(CreateAccountCommand("ACC002", "Two"))

        accounts = await ListAccountsHandler(account_repo).handle(ListAccountsQuery())

        assert [a.account_number.value for a in accounts] == ["ACC001", "ACC002"]


class TestCreateLedgerEventHandler:
    async def test_creates_debit(self, event_repo: InMemoryLedgerEventRepository) -> None:
        handler = CreateLedgerEventHandler(event_repo)

        event = await handler.handle(CreateLedgerEventCommand.debit(1, 1000, "Test debit"))

        assert event.id == 1
        assert event.event_type is EventType.DEBIT
        assert event.amount.value == 1000
        assert event.description == "Test debit"

    async def test_event_type_is_case_insensitive(self, event_repo: InMemoryLedgerEventRepository) -> None:
        event = await CreateLedgerEventHandler(event_repo).handle(CreateLedgerEventCommand(1, "credit", 10))
        assert event.event_type is EventType.CREDIT

    async def test_zero_amount_never_reaches_repository(self, event_repo: InMemoryLedgerEventRepository) -> None:
        with pytest.raises(ValidationError, match="Amount must be positive"):
            await CreateLedgerEventHandler(event_repo).handle(CreateLedgerEventCommand.credit(1, 0))
        assert event_repo.calls == []

    async def test_negative_amount_never_reaches_repository(
        self, event_repo: InMemoryLedgerEventRepository
    ) -> None:
        with pytest.raises(InvalidAmountError):
            await CreateLedgerEventHandler(event_repo).handle(CreateLedgerEventCommand.debit(1, -5))
        assert event_repo.calls == []

    async def test_unknown_type_never_reaches_repository(self, event_repo: InMemoryLedgerEventRepository) -> None:
        with pytest.raises(ValidationError):
            await CreateLedgerEventHandler(event_repo).handle(CreateLedgerEventCommand(1, "REFUND", 10))
        assert event_repo.calls == []

    async def test_account_reference_is_not_checked(self, event_repo: InMemoryLedgerEventRepository) -> None:
        # No account repository is involved at all.
        event = await CreateLedgerEventHandler(event_repo).handle(CreateLedgerEventCommand.credit(404, 1))
        assert event.account_id == 404

    async def test_overdraft_is_accepted(self, event_repo: InMemoryLedgerEventRepository) -> None:
        await _record(event_repo, CreateLedgerEventCommand.debit(1, 500))
        assert await event_repo.calculate_balance(1) == -500


class TestLedgerEventQueries:
    async def test_list_all_and_filtered(self, event_repo: InMemoryLedgerEventRepository) -> None:
        await _record(
            event_repo,
            CreateLedgerEventCommand.credit(1, 100),
            CreateLedgerEventCommand.credit(2, 200),
            CreateLedgerEventCommand.debit(1, 50),
        )
        handler = ListLedgerEventsHandler(event_repo)

        everything = await handler.handle(ListLedgerEventsQuery())
        scoped = await handler.handle(ListLedgerEventsQuery.for_account(1))

        assert len(everything) == 3
        assert [e.amount.value for e in scoped] == [100, 50]
        assert all(e.account_id == 1 for e in scoped)

    async def test_get_event(self, event_repo: InMemoryLedgerEventRepository) -> None:
        await _record(event_repo, CreateLedgerEventCommand.credit(1, 100))

        event = await GetLedgerEventHandler(event_repo).handle(GetLedgerEventQuery(1))

        assert event.amount.value == 100

    async def test_get_missing_event(self, event_repo: InMemoryLedgerEventRepository) -> None:
        with pytest.raises(TransactionNotFoundError):
            await GetLedgerEventHandler(event_repo).handle(GetLedgerEventQuery(7))


class TestGetAccountBalanceHandler:
    async def test_live_balance(
        self,
        event_repo: InMemoryLedgerEventRepository,
        balance_repo: InMemoryAccountBalanceRepository,
    ) -> None:
        await _record(
            event_repo,
            CreateLedgerEventCommand.credit(1, 1000),
            CreateLedgerEventCommand.debit(1, 300),
            CreateLedgerEventCommand.credit(1, 200),
        )
        handler = GetAccountBalanceHandler(event_repo, balance_repo)

        balance = await handler.handle(GetAccountBalanceQuery(1))

        assert balance.balance.value == 900
        assert balance.id is None
        assert balance.snapshot_at is None
        assert balance_repo.calls == []

    async def test_snapshot_requested_but_missing_falls_back(
        self,
        event_repo: InMemoryLedgerEventRepository,
        balance_repo: InMemoryAccountBalanceRepository,
    ) -> None:
        await _record(event_repo, CreateLedgerEventCommand.credit(1, 3000))
        handler = GetAccountBalanceHandler(event_repo, balance_repo)

        balance = await handler.handle(GetAccountBalanceQuery.with_snapshot(1))

        assert balance.balance.value == 3000
        assert balance.id is None
        assert balance_repo.calls == ["find_latest_by_account_id"]
        assert balance_repo.snapshots == []

    async def test_stale_snapshot_returned_as_is(
        self,
        event_repo: InMemoryLedgerEventRepository,
        balance_repo: InMemoryAccountBalanceRepository,
    ) -> None:
        stored = await balance_repo.save(AccountBalance(account_id=1, balance=Money(100)))
        await _record(event_repo, CreateLedgerEventCommand.credit(1, 5000))
        handler = GetAccountBalanceHandler(event_repo, balance_repo)

        balance = await handler.handle(GetAccountBalanceQuery.with_snapshot(1))

        assert balance == stored
        assert "calculate_balance" not in event_repo.calls

    async def test_negative_live_balance_is_rejected(
        self,
        event_repo: InMemoryLedgerEventRepository,
        balance_repo: InMemoryAccountBalanceRepository,
    ) -> None:
        await _record(event_repo, CreateLedgerEventCommand.debit(1, 10))

        with pytest.raises(ValidationError, match="Invalid balance"):
            await GetAccountBalanceHandler(event_repo, balance_repo).handle(GetAccountBalanceQuery(1))


class TestCreateBalanceSnapshotHandler:
    async def test_persists_recomputed_balance(
        self,
        event_repo: InMemoryLedgerEventRepository,
        balance_repo: InMemoryAccountBalanceRepository,
    ) -> None:
        await _record(event_repo, CreateLedgerEventCommand.credit(1, 5000))
        handler = CreateBalanceSnapshotHandler(event_repo, balance_repo)

        snapshot = await handler.handle(CreateBalanceSnapshotCommand(1))

        assert snapshot.id == 1
        assert snapshot.balance.value == 5000
        assert snapshot.snapshot_at is not None

    async def test_ignores_existing_snapshot_and_accumulates(
        self,
        event_repo: InMemoryLedgerEventRepository,
        balance_repo: InMemoryAccountBalanceRepository,
    ) -> None:
        handler = CreateBalanceSnapshotHandler(event_repo, balance_repo)
        await _record(event_repo, CreateLedgerEventCommand.credit(1, 100))
        first = await handler.handle(CreateBalanceSnapshotCommand(1))
        await _record(event_repo, CreateLedgerEventCommand.credit(1, 50))

        second = await handler.handle(CreateBalanceSnapshotCommand(1))

        assert (first.balance.value, second.balance.value) == (100, 150)
        assert "find_latest_by_account_id" not in balance_repo.calls
        history = await ListBalanceSnapshotsHandler(balance_repo).handle(ListBalanceSnapshotsQuery(1))
        assert [s.id for s in history] == [second.id, first.id]

    async def test_negative_balance_cannot_be_snapshotted(
        self,
        event_repo: InMemoryLedgerEventRepository,
        balance_repo: InMemoryAccountBalanceRepository,
    ) -> None:
        await _record(event_repo, CreateLedgerEventCommand.debit(1, 10))

        with pytest.raises(InvalidAmountError):
            await CreateBalanceSnapshotHandler(event_repo, balance_repo).handle(CreateBalanceSnapshotCommand(1))

        assert balance_repo.snapshots == []
