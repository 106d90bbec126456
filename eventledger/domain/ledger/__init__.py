"""Ledger event domain exports"""

from .balance import calculate_balance
from .models import EventType, LedgerEvent
from .repository import LedgerEventRepository

__all__ = [
    "EventType",
    "LedgerEvent",
    "LedgerEventRepository",
    "calculate_balance",
]
