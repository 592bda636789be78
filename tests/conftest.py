from __future__ import annotations

from typing import Any

import pytest
from better_auth_mcp.app.config_store import AuthConfigStore
from better_auth_mcp.app.dispatcher import Dispatcher
from better_auth_mcp.app.resources import build_default_resource_catalog
from better_auth_mcp.app.tools.defaults import build_default_tool_registry
from better_auth_mcp.app.tools.registry import ToolRegistry

# 각 도구를 호출할 수 있는 최소 인자예요.
MINIMAL_ARGUMENTS: dict[str, dict[str, Any]] = {
    "analyze_project": {"projectPath": "/srv/app"},
    "setup_better_auth": {"projectPath": "/srv/app", "config": {"projectId": "p1", "apiKey": "k1"}},
    "analyze_current_auth": {"projectPath": "/srv/app"},
    "generate_migration_plan": {"projectPath": "/srv/app", "currentAuthType": "next-auth"},
    "test_auth_flows": {"flows": ["login"]},
    "test_security": {},
    "analyze_logs": {"timeRange": "24h"},
    "monitor_auth_flows": {"duration": "1h"},
}


@pytest.fixture
def minimal_arguments() -> dict[str, dict[str, Any]]:
    return {name: dict(arguments) for name, arguments in MINIMAL_ARGUMENTS.items()}


@pytest.fixture
def config_store() -> AuthConfigStore:
    """각 테스트용으로 새로 생성한 빈 설정 보관소예요."""
    return AuthConfigStore()


@pytest.fixture
def tool_registry(config_store: AuthConfigStore) -> ToolRegistry:
    return build_default_tool_registry(config_store=config_store)


@pytest.fixture
def dispatcher(config_store: AuthConfigStore, tool_registry: ToolRegistry) -> Dispatcher:
    return Dispatcher(
        registry=tool_registry,
        resources=build_default_resource_catalog(config_store=config_store),
    )
