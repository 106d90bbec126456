"""SQLAlchemy-backed repository implementations."""

from .account_balance_repository import SqlAccountBalanceRepository
from .account_repository import SqlAccountRepository
from .ledger_event_repository import SqlLedgerEventRepository

__all__ = [
    "SqlAccountRepository",
    "SqlLedgerEventRepository",
    "SqlAccountBalanceRepository",
]
