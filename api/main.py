# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: main.py
# -----------------------------------------------------------------------------
import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI

import settings
from api.AppContainer import AppContainer
from api.routers import health, search

logger = logging.getLogger(__name__)


def create_app(
    container_factory: Optional[Callable[[], AppContainer]] = None,
    warm_index: Optional[bool] = None,
) -> FastAPI:
    factory = container_factory or AppContainer
    warm = settings.WARM_INDEX_ON_STARTUP if warm_index is None else warm_index

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container = factory()
        app.state.container = container
        if warm:
            # configuration errors surface here, before any request is served
            logger.info("Warming product index at startup")
            await container.search_service.ensure_indexed()
        yield

    app = FastAPI(title="Product Search API", lifespan=lifespan)
    app.include_router(health.router)
    app.include_router(search.router)
    return app


logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
app = create_app()
