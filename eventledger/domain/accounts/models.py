"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from eventledger.domain.common import AccountNumber
from eventledger.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Account:
    """Ledger account keyed by a unique account number.

    The entity carries no balance: balances are always derived from the
    account's ledger events. ``id`` and the timestamps are assigned by the
    repository on first save.
    """

    account_number: AccountNumber
    account_name: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        if not self.account_name:
            raise ValidationError("Account name cannot be empty")
