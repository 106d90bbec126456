"""Ledger event domain models."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from eventledger.domain.common import Money
from eventledger.domain.errors import InvalidTransactionTypeError, ValidationError


class EventType(str, enum.Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    @classmethod
    def from_string(cls, value: str) -> "EventType":
        """Parse ``value`` case-insensitively."""
        try:
            return cls(value.upper())
        except (AttributeError, ValueError):
            raise InvalidTransactionTypeError(str(value)) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LedgerEvent:
    """An immutable signed monetary fact attributed to one account."""

    account_id: int
    event_type: EventType
    amount: Money
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def debit(cls, account_id: int, amount: Money, description: Optional[str] = None) -> "LedgerEvent":
        return cls(account_id=account_id, event_type=EventType.DEBIT, amount=amount, description=description)

    @classmethod
    def credit(cls, account_id: int, amount: Money, description: Optional[str] = None) -> "LedgerEvent":
        return cls(account_id=account_id, event_type=EventType.CREDIT, amount=amount, description=description)

    def validate(self) -> None:
        if self.amount.value <= 0:
            raise ValidationError("Amount must be positive")

    @property
    def signed_amount(self) -> int:
        if self.event_type is EventType.CREDIT:
            return self.amount.value
        return -self.amount.value
