"""One handler class per command or query."""

from .accounts import CreateAccountHandler, GetAccountHandler, ListAccountsHandler
from .balances import (
    CreateBalanceSnapshotHandler,
    GetAccountBalanceHandler,
    ListBalanceSnapshotsHandler,
)
from .ledger_events import CreateLedgerEventHandler, GetLedgerEventHandler, ListLedgerEventsHandler

__all__ = [
    "CreateAccountHandler",
    "GetAccountHandler",
    "ListAccountsHandler",
    "CreateLedgerEventHandler",
    "GetLedgerEventHandler",
    "ListLedgerEventsHandler",
    "GetAccountBalanceHandler",
    "CreateBalanceSnapshotHandler",
    "ListBalanceSnapshotsHandler",
]
