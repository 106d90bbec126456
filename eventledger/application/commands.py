"""Command payloads accepted by the mediator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class CreateAccountCommand:
    account_number: str
    account_name: str


@dataclass(frozen=True, slots=True)
class CreateLedgerEventCommand:
    account_id: int
    event_type: str
    amount: int
    description: Optional[str] = None

    @classmethod
    def debit(cls, account_id: int, amount: int, description: Optional[str] = None) -> "CreateLedgerEventCommand":
        return cls(account_id, "DEBIT", amount, description)

    @classmethod
    def credit(cls, account_id: int, amount: int, description: Optional[str] = None) -> "CreateLedgerEventCommand":
        return cls(account_id, "CREDIT", amount, description)


@dataclass(frozen=True, slots=True)
class CreateBalanceSnapshotCommand:
    account_id: int
