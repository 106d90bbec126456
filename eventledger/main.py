import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from eventledger import __version__
from eventledger.api import create_api_router
from eventledger.api.errors import register_error_handlers
from eventledger.core.config import get_settings
from eventledger.core.container import get_container
from eventledger.infrastructure.database import dispose_engine, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = get_container()
    if container.settings.database.create_tables:
        await init_db()
    logger.info(
        "%s %s started (environment=%s)",
        container.settings.project_name,
        __version__,
        container.settings.environment,
    )
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.project_name,
        description="Account ledger with balances derived from DEBIT/CREDIT events",
        version=__version__,
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    return app
