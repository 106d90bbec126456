"""Balance snapshot domain exports"""

from .models import AccountBalance
from .repository import AccountBalanceRepository

__all__ = [
    "AccountBalance",
    "AccountBalanceRepository",
]
