"""Self-validating value objects shared by the ledger aggregates."""

from __future__ import annotations

from dataclasses import dataclass

from eventledger.domain.errors import (
    InsufficientBalanceError,
    InvalidAccountNumberError,
    InvalidAmountError,
    MoneyOverflowError,
)

# Amounts are stored as signed 64-bit integers (minor currency units).
INT64_MAX = 2**63 - 1

ACCOUNT_NUMBER_MAX_LENGTH = 50


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """Non-negative integral amount in minor units.

    Instances are immutable; ``add`` and ``subtract`` return new values and
    never produce an amount outside ``[0, INT64_MAX]``.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAmountError(self.value)
        if self.value < 0 or self.value > INT64_MAX:
            raise InvalidAmountError(self.value)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    def add(self, other: "Money") -> "Money":
        total = self.value + other.value
        if total > INT64_MAX:
            raise MoneyOverflowError()
        return Money(total)

    def subtract(self, other: "Money") -> "Money":
        if self.value < other.value:
            raise InsufficientBalanceError(required=other.value, available=self.value)
        return Money(self.value - other.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AccountNumber:
    """Natural key of an account: a non-empty string of at most 50 characters."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidAccountNumberError("Account number cannot be empty")
        if len(self.value) > ACCOUNT_NUMBER_MAX_LENGTH:
            raise InvalidAccountNumberError("Account number too long")

    def __str__(self) -> str:
        return self.value
