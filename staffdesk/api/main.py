"""FastAPI application factory.

Assembles CORS and all API routers.  The staff tables are created on
startup unless ``AUTO_CREATE_SCHEMA`` is disabled (managed deployments run
the Alembic revisions instead).  This module is the authoritative app
object — staffdesk/main.py re-exports it.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staffdesk.api.routes.health import router as health_router
from staffdesk.api.routes.nic import router as nic_router
from staffdesk.api.routes.staff import router as staff_router
from staffdesk.core.logging import setup_logging
from staffdesk.core.settings import get_settings
from staffdesk.db.session import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    if get_settings().auto_create_schema:
        init_db()
        logger.info("Database schema initialized")
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# The desktop shell loads the UI from a local origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(staff_router)
app.include_router(nic_router)
