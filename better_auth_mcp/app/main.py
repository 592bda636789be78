from __future__ import annotations

from fastapi import FastAPI

from better_auth_mcp.app.routes import router
from better_auth_mcp.app.settings import Settings, settings
from better_auth_mcp.bootstrap.lifespan import create_lifespan
from libs.common.http_handlers import register_exception_handlers
from libs.common.logging import configure_logging


def create_app(app_settings: Settings) -> FastAPI:
    app = FastAPI(
        title=app_settings.service_name,
        version=app_settings.server_version,
        lifespan=create_lifespan(app_settings),
    )
    app.include_router(router)
    register_exception_handlers(app, "better_auth_mcp.errors")
    return app


def build_app() -> FastAPI:
    """uvicorn factory 진입점이에요. 로깅 구성은 여기서 한 번만 해요."""
    configure_logging(
        level=settings.log_level,
        log_file=settings.log_file or None,
        console=settings.console_logging_enabled,
    )
    return create_app(settings)
