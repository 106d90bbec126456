"""Query payloads accepted by the mediator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class GetAccountQuery:
    account_id: int


@dataclass(frozen=True, slots=True)
class GetAccountByNumberQuery:
    account_number: str


@dataclass(frozen=True, slots=True)
class ListAccountsQuery:
    pass


@dataclass(frozen=True, slots=True)
class GetAccountBalanceQuery:
    account_id: int
    # Serve the latest stored snapshot when one exists instead of replaying events.
    use_snapshot: bool = False

    @classmethod
    def with_snapshot(cls, account_id: int) -> "GetAccountBalanceQuery":
        return cls(account_id, use_snapshot=True)


@dataclass(frozen=True, slots=True)
class GetLedgerEventQuery:
    event_id: int


@dataclass(frozen=True, slots=True)
class ListLedgerEventsQuery:
    account_id: Optional[int] = None

    @classmethod
    def for_account(cls, account_id: int) -> "ListLedgerEventsQuery":
        return cls(account_id)


@dataclass(frozen=True, slots=True)
class ListBalanceSnapshotsQuery:
    account_id: int
