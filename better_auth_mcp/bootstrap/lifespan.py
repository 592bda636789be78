from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from better_auth_mcp.app.settings import Settings
from better_auth_mcp.bootstrap.container import build_runtime_components
from libs.common.logging import get_logger

logger = get_logger("better_auth_mcp.lifespan")


def create_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        runtime = await build_runtime_components(settings)

        app.state.config_store = runtime.config_store
        app.state.dispatcher = runtime.dispatcher
        app.state.server_info = runtime.server_info
        app.state.settings = settings

        logger.info("server_started", transport="http", tools=len(runtime.tool_registry))
        try:
            yield
        finally:
            logger.info("server_stopped", transport="http")

    return lifespan
