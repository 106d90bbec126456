"""SQLAlchemy implementation of the append-only ledger event store."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from eventledger.db.models import LedgerEvent as LedgerEventModel
from eventledger.domain.common import Money
from eventledger.domain.errors import AccountNotFoundError, TransactionNotFoundError
from eventledger.domain.ledger import EventType, LedgerEvent, LedgerEventRepository, calculate_balance

from .base import AsyncRepository

logger = logging.getLogger(__name__)


class SqlLedgerEventRepository(AsyncRepository[LedgerEventModel], LedgerEventRepository):
    async def save(self, event: LedgerEvent) -> LedgerEvent:
        model = LedgerEventModel(
            account_id=event.account_id,
            event_type=str(event.event_type),
            amount=event.amount.value,
            description=event.description,
        )
        try:
            await self._insert(model)
        except IntegrityError as exc:
            await self.session.rollback()
            logger.error("Rejected ledger event for unknown account_id=%s", event.account_id)
            raise AccountNotFoundError(f"Account with id {event.account_id} not found") from exc
        except SQLAlchemyError as exc:
            raise self._wrap("save ledger event", exc) from exc
        return self._to_domain(model)

    async def find_by_id(self, event_id: int) -> LedgerEvent:
        stmt = select(LedgerEventModel).where(LedgerEventModel.id == event_id)
        model = await self._first(stmt, "find ledger event")
        if model is None:
            raise TransactionNotFoundError(event_id)
        return self._to_domain(model)

    async def find_by_account_id(self, account_id: int) -> Sequence[LedgerEvent]:
        stmt = (
            select(LedgerEventModel)
            .where(LedgerEventModel.account_id == account_id)
            .order_by(LedgerEventModel.created_at.asc(), LedgerEventModel.id.asc())
        )
        models = await self._all(stmt, "find ledger events")
        return [self._to_domain(model) for model in models]

    async def find_all(self) -> Sequence[LedgerEvent]:
        stmt = select(LedgerEventModel).order_by(
            LedgerEventModel.created_at.desc(), LedgerEventModel.id.desc()
        )
        models = await self._all(stmt, "find all ledger events")
        return [self._to_domain(model) for model in models]

    async def calculate_balance(self, account_id: int) -> int:
        events = await self.find_by_account_id(account_id)
        return calculate_balance(events)

    @staticmethod
    def _to_domain(model: LedgerEventModel) -> LedgerEvent:
        return LedgerEvent(
            id=model.id,
            account_id=model.account_id,
            event_type=EventType.from_string(model.event_type),
            amount=Money(model.amount),
            description=model.description,
            created_at=model.created_at,
        )
