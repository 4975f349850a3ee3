"""FastAPI application -- Compose Check entrypoint."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

import composecheck.deps as deps
from composecheck.api.templates import router as templates_router
from composecheck.api.validate import router as validate_router
from composecheck.config import load_options

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: load options on startup, clear them on shutdown."""
    log_level = logging.DEBUG if os.environ.get("COMPOSECHECK_DEV_MODE") else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    deps._options = load_options()
    logger.info("Compose Check starting with options: %s", deps._options.model_dump())

    yield

    deps._options = None


app = FastAPI(
    title="Compose Check",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(validate_router)
app.include_router(templates_router)
