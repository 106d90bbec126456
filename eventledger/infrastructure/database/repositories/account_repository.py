"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from eventledger.db.models import Account as AccountModel
from eventledger.domain.accounts import Account, AccountRepository
from eventledger.domain.common import AccountNumber
from eventledger.domain.errors import AccountNotFoundError, DuplicateAccountNumberError

from .base import AsyncRepository

logger = logging.getLogger(__name__)


class SqlAccountRepository(AsyncRepository[AccountModel], AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    async def save(self, account: Account) -> Account:
        model = AccountModel(
            account_number=account.account_number.value,
            account_name=account.account_name,
        )
        try:
            await self._insert(model)
        except IntegrityError as exc:
            # Lost the race against a concurrent create with the same number.
            await self.session.rollback()
            raise DuplicateAccountNumberError(account.account_number.value) from exc
        except SQLAlchemyError as exc:
            raise self._wrap("save account", exc) from exc
        logger.info("Account saved to database: id=%s", model.id)
        return self._to_domain(model)

    async def find_by_id(self, account_id: int) -> Account:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        model = await self._first(stmt, "find account")
        if model is None:
            raise AccountNotFoundError(f"Account with id {account_id} not found")
        return self._to_domain(model)

    async def find_by_account_number(self, account_number: AccountNumber) -> Account:
        stmt = select(AccountModel).where(AccountModel.account_number == account_number.value)
        model = await self._first(stmt, "find account")
        if model is None:
            raise AccountNotFoundError(f"Account with number {account_number} not found")
        return self._to_domain(model)

    async def find_all(self) -> Sequence[Account]:
        stmt = select(AccountModel).order_by(AccountModel.id.asc())
        models = await self._all(stmt, "find all accounts")
        return [self._to_domain(model) for model in models]

    async def exists_by_account_number(self, account_number: AccountNumber) -> bool:
        stmt = select(exists().where(AccountModel.account_number == account_number.value))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise self._wrap("check account number", exc) from exc
        return bool(result.scalar())

    @staticmethod
    def _to_domain(model: AccountModel) -> Account:
        return Account(
            id=model.id,
            account_number=AccountNumber(model.account_number),
            account_name=model.account_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
