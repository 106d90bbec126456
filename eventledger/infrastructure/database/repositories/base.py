"""Shared plumbing for the SQLAlchemy repositories."""

from __future__ import annotations

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from eventledger.domain.errors import RepositoryError

ModelT = TypeVar("ModelT")

logger = logging.getLogger(__name__)


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session.

    Every storage failure leaves as :class:`RepositoryError`; subclasses
    catch the narrower errors they can interpret before calling in here.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def _insert(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def _all(self, stmt: Select[Any], action: str) -> Sequence[ModelT]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise self._wrap(action, exc) from exc
        return result.scalars().all()

    async def _first(self, stmt: Select[Any], action: str) -> ModelT | None:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise self._wrap(action, exc) from exc
        return result.scalars().first()

    @staticmethod
    def _wrap(action: str, exc: SQLAlchemyError) -> RepositoryError:
        logger.error("Failed to %s: %s", action, exc)
        return RepositoryError(f"Failed to {action}: {exc}")
