"""기본 도구 카탈로그를 등록한 ToolRegistry를 생성하는 팩토리예요."""

from __future__ import annotations

from better_auth_mcp.app.config_store import AuthConfigStore
from better_auth_mcp.app.tools.debugging import AnalyzeLogsTool, MonitorAuthFlowsTool
from better_auth_mcp.app.tools.installation import AnalyzeProjectTool, SetupBetterAuthTool
from better_auth_mcp.app.tools.migration import AnalyzeCurrentAuthTool, GenerateMigrationPlanTool
from better_auth_mcp.app.tools.registry import ToolRegistry
from better_auth_mcp.app.tools.verification import AuthFlowTestTool, SecurityTestTool


def build_default_tool_registry(*, config_store: AuthConfigStore) -> ToolRegistry:
    """기본 도구가 모두 등록된 `ToolRegistry`를 생성해요.

    Args:
        config_store: `setup_better_auth`가 교체할 공유 설정 보관소예요.

    Returns:
        설치, 이전, 점검, 디버깅 순서로 8개 도구가 등록된 `ToolRegistry`예요.
    """
    registry = ToolRegistry()
    registry.register(AnalyzeProjectTool())
    registry.register(SetupBetterAuthTool(config_store=config_store))
    registry.register(AnalyzeCurrentAuthTool())
    registry.register(GenerateMigrationPlanTool())
    registry.register(AuthFlowTestTool())
    registry.register(SecurityTestTool())
    registry.register(AnalyzeLogsTool())
    registry.register(MonitorAuthFlowsTool())
    return registry
