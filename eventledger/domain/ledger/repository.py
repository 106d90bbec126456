"""Repository protocol for ledger events."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import LedgerEvent


class LedgerEventRepository(Protocol):
    """Append-only store of ledger events."""

    async def save(self, event: LedgerEvent) -> LedgerEvent:
        ...

    async def find_by_id(self, event_id: int) -> LedgerEvent:
        """Raise ``TransactionNotFoundError`` when no event has this id."""
        ...

    async def find_by_account_id(self, account_id: int) -> Sequence[LedgerEvent]:
        """Events of one account ordered by creation time, oldest first."""
        ...

    async def find_all(self) -> Sequence[LedgerEvent]:
        ...

    async def calculate_balance(self, account_id: int) -> int:
        """Must agree with :func:`eventledger.domain.ledger.balance.calculate_balance`."""
        ...
