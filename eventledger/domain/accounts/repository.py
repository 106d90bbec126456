"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from eventledger.domain.common import AccountNumber

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def save(self, account: Account) -> Account:
        ...

    async def find_by_id(self, account_id: int) -> Account:
        """Raise ``AccountNotFoundError`` when no account has this id."""
        ...

    async def find_by_account_number(self, account_number: AccountNumber) -> Account:
        ...

    async def find_all(self) -> Sequence[Account]:
        ...

    async def exists_by_account_number(self, account_number: AccountNumber) -> bool:
        ...
