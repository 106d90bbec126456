"""Balance derivation from an account's event history."""

from __future__ import annotations

from typing import Iterable

from .models import LedgerEvent


def calculate_balance(events: Iterable[LedgerEvent]) -> int:
    """Fold events (oldest first) into a signed balance.

    Credits add, debits subtract. The result is a plain ``int`` because an
    unguarded history may legitimately go below zero.
    """
    balance = 0
    for event in events:
        balance += event.signed_amount
    return balance
