from __future__ import annotations

from dataclasses import dataclass

from better_auth_mcp.app.config_store import AuthConfigStore
from better_auth_mcp.app.dispatcher import Dispatcher
from better_auth_mcp.app.mcp_protocol import McpServerInfo
from better_auth_mcp.app.resources import (
    FileLogSource,
    LogSource,
    PlaceholderLogSource,
    ResourceCatalog,
    build_default_resource_catalog,
)
from better_auth_mcp.app.settings import Settings
from better_auth_mcp.app.tools.defaults import build_default_tool_registry
from better_auth_mcp.app.tools.registry import ToolRegistry
from libs.common.logging import get_logger

logger = get_logger("better_auth_mcp.bootstrap")


@dataclass(slots=True)
class RuntimeComponents:
    config_store: AuthConfigStore
    tool_registry: ToolRegistry
    resource_catalog: ResourceCatalog
    dispatcher: Dispatcher
    server_info: McpServerInfo


def _build_log_source(settings: Settings) -> LogSource:
    if settings.log_file:
        return FileLogSource(settings.log_file, max_lines=settings.logs_resource_max_lines)
    return PlaceholderLogSource()


async def _apply_startup_auth_config(dispatcher: Dispatcher, settings: Settings) -> None:
    """환경 변수로 받은 설정을 setup_better_auth 호출로 주입해요."""
    if not settings.has_startup_auth_config:
        return
    config: dict[str, str] = {
        "projectId": settings.project_id or "",
        "apiKey": settings.api_key or "",
    }
    if settings.auth_environment:
        config["environment"] = settings.auth_environment
    await dispatcher.call_tool(
        "setup_better_auth",
        {"projectPath": settings.workspace_root, "config": config},
    )
    logger.info("startup_auth_config_applied", project_id=settings.project_id)


async def build_runtime_components(settings: Settings) -> RuntimeComponents:
    config_store = AuthConfigStore()
    tool_registry = build_default_tool_registry(config_store=config_store)
    resource_catalog = build_default_resource_catalog(
        config_store=config_store,
        log_source=_build_log_source(settings),
    )
    dispatcher = Dispatcher(registry=tool_registry, resources=resource_catalog)
    await _apply_startup_auth_config(dispatcher, settings)

    return RuntimeComponents(
        config_store=config_store,
        tool_registry=tool_registry,
        resource_catalog=resource_catalog,
        dispatcher=dispatcher,
        server_info=McpServerInfo(name=settings.service_name, version=settings.server_version),
    )
