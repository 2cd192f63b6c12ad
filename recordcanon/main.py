"""FastAPI application.

Logging is configured and the rules document is loaded once, in the
lifespan handler, before the first request is served.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recordcanon.api.routes.health import router as health_router
from recordcanon.api.routes.normalize import router as normalize_router
from recordcanon.api.routes.selftest import router as selftest_router
from recordcanon.api.routes.validation import router as validation_router
from recordcanon.core.logging import setup_logging
from recordcanon.core.settings import get_settings
from recordcanon.rules.registry import get_rule_set

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    rules = get_rule_set()
    logger.info("Rule set ready (source=%s)", rules.source or "built-in defaults")
    yield


settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
app.include_router(health_router)
app.include_router(normalize_router)
app.include_router(validation_router)
app.include_router(selftest_router)
