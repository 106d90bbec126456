"""Ledger domain specific exceptions."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for ledger domain errors."""


class AccountNotFoundError(DomainError):
    """Raised when the requested account cannot be found."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Account not found: {message}")


class TransactionNotFoundError(DomainError):
    """Raised when the requested ledger event cannot be found."""

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f"Transaction not found: {event_id}")


class InsufficientBalanceError(DomainError):
    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient balance: required {required}, available {available}"
        )


class InvalidAmountError(DomainError):
    def __init__(self, amount: object) -> None:
        self.amount = amount
        super().__init__(f"Invalid amount: {amount}")


class InvalidAccountNumberError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid account number: {message}")


class DuplicateAccountNumberError(DomainError):
    """Raised when attempting to create an account with a taken account number."""

    def __init__(self, account_number: str) -> None:
        self.account_number = account_number
        super().__init__(f"Duplicate account number: {account_number}")


class RepositoryError(DomainError):
    """Wraps any failure reported by a persistence collaborator."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Repository error: {message}")


class ValidationError(DomainError):
    """Entity-level rule violation."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Validation error: {message}")


class MoneyOverflowError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Amount overflow")


class InvalidTransactionTypeError(ValidationError):
    """Raised when an event type string is neither DEBIT nor CREDIT."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid event type: {value}")


__all__ = [
    "DomainError",
    "AccountNotFoundError",
    "TransactionNotFoundError",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "InvalidAccountNumberError",
    "InvalidTransactionTypeError",
    "DuplicateAccountNumberError",
    "RepositoryError",
    "ValidationError",
    "MoneyOverflowError",
]
