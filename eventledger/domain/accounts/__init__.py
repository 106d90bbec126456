"""Account domain models and repository contract."""

from .models import Account
from .repository import AccountRepository

__all__ = [
    "Account",
    "AccountRepository",
]
