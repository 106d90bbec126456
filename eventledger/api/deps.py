"""Reusable FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventledger.application import Mediator
from eventledger.infrastructure.database import get_session as get_db_session


def get_mediator(db: AsyncSession = Depends(get_db_session)) -> Mediator:
    return Mediator.with_session(db)


__all__ = [
    "get_db_session",
    "get_mediator",
]
