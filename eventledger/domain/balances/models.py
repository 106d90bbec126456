"""Domain model for balance snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from eventledger.domain.common import Money


@dataclass(frozen=True, slots=True)
class AccountBalance:
    """Point-in-time balance of an account.

    Persisted snapshots carry ``id`` and ``snapshot_at``; a balance computed
    on the fly from events has neither.
    """

    account_id: int
    balance: Money
    id: Optional[int] = None
    snapshot_at: Optional[datetime] = None
