"""SQLAlchemy implementation for balance snapshots"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from eventledger.db.models import AccountBalance as AccountBalanceModel
from eventledger.domain.balances import AccountBalance, AccountBalanceRepository
from eventledger.domain.common import Money
from eventledger.domain.errors import AccountNotFoundError

from .base import AsyncRepository


class SqlAccountBalanceRepository(AsyncRepository[AccountBalanceModel], AccountBalanceRepository):
    async def save(self, balance: AccountBalance) -> AccountBalance:
        model = AccountBalanceModel(account_id=balance.account_id, balance=balance.balance.value)
        try:
            await self._insert(model)
        except IntegrityError as exc:
            await self.session.rollback()
            raise AccountNotFoundError(f"Account with id {balance.account_id} not found") from exc
        except SQLAlchemyError as exc:
            raise self._wrap("save balance snapshot", exc) from exc
        return self._to_domain(model)

    async def find_latest_by_account_id(self, account_id: int) -> AccountBalance | None:
        stmt = (
            select(AccountBalanceModel)
            .where(AccountBalanceModel.account_id == account_id)
            .order_by(AccountBalanceModel.snapshot_at.desc(), AccountBalanceModel.id.desc())
            .limit(1)
        )
        model = await self._first(stmt, "find latest balance snapshot")
        if model is None:
            return None
        return self._to_domain(model)

    async def find_all_by_account_id(self, account_id: int) -> Sequence[AccountBalance]:
        stmt = (
            select(AccountBalanceModel)
            .where(AccountBalanceModel.account_id == account_id)
            .order_by(AccountBalanceModel.snapshot_at.desc(), AccountBalanceModel.id.desc())
        )
        models = await self._all(stmt, "find balance snapshots")
        return [self._to_domain(model) for model in models]

    @staticmethod
    def _to_domain(model: AccountBalanceModel) -> AccountBalance:
        return AccountBalance(
            id=model.id,
            account_id=model.account_id,
            balance=Money(model.balance),
            snapshot_at=model.snapshot_at,
        )
