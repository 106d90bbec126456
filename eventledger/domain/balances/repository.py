"""Repository protocol for balance snapshots."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import AccountBalance


class AccountBalanceRepository(Protocol):
    async def save(self, balance: AccountBalance) -> AccountBalance:
        ...

    async def find_latest_by_account_id(self, account_id: int) -> AccountBalance | None:
        ...

    async def find_all_by_account_id(self, account_id: int) -> Sequence[AccountBalance]:
        """Snapshots of one account, newest first."""
        ...
