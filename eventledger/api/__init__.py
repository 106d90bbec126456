from fastapi import APIRouter

from eventledger.api.routers import accounts, balances, events


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
    router.include_router(events.router, prefix="/events", tags=["ledger events"])
    router.include_router(balances.router, prefix="/balances", tags=["balances"])
    return router


__all__ = [
    "create_api_router",
]
