"""Shared abstractions used across domain modules."""

from .value_objects import ACCOUNT_NUMBER_MAX_LENGTH, INT64_MAX, AccountNumber, Money

__all__ = [
    "ACCOUNT_NUMBER_MAX_LENGTH",
    "INT64_MAX",
    "AccountNumber",
    "Money",
]
