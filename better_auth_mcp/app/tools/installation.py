"""프로젝트 분석과 Better-Auth 설치 도구예요."""

from __future__ import annotations

from typing import Any

from better_auth_mcp.app.config_store import AuthConfig, AuthConfigStore
from better_auth_mcp.app.tools.base import PROJECT_PATH_PROPERTY, BaseTool, ToolResult
from libs.common.logging import get_logger

logger = get_logger("better_auth_mcp.tools.installation")


class AnalyzeProjectTool(BaseTool):
    @property
    def name(self) -> str:
        return "analyze_project"

    @property
    def description(self) -> str:
        return "Analyze project structure and dependencies to recommend Better-Auth setup approach"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "projectPath": dict(PROJECT_PATH_PROPERTY),
            },
            "required": ["projectPath"],
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        project_path = arguments["projectPath"]
        logger.info("analyzing_project", project_path=project_path)
        return ToolResult.text(f"Project analysis complete for {project_path}")


class SetupBetterAuthTool(BaseTool):
    """Better-Auth 설정을 받아 공유 설정 보관소를 교체해요."""

    def __init__(self, *, config_store: AuthConfigStore) -> None:
        self._config_store = config_store

    @property
    def name(self) -> str:
        return "setup_better_auth"

    @property
    def description(self) -> str:
        return "Install and configure Better-Auth in the project"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "projectPath": dict(PROJECT_PATH_PROPERTY),
                "config": {
                    "type": "object",
                    "description": "Better-Auth configuration options",
                    "properties": {
                        "projectId": {"type": "string"},
                        "apiKey": {"type": "string"},
                        "environment": {"type": "string"},
                    },
                    "required": ["projectId", "apiKey"],
                },
            },
            "required": ["projectPath", "config"],
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        project_path = arguments["projectPath"]
        logger.info("setting_up_better_auth", project_path=project_path)
        config = AuthConfig.from_payload(arguments["config"])
        previous = await self._config_store.replace(config)
        # apiKey 값은 로그에 남기지 않아요.
        logger.info(
            "auth_config_replaced",
            project_id=config.project_id,
            environment=config.environment,
            previous_project_id=previous.project_id,
        )
        return ToolResult.text(f"Better-Auth setup complete in {project_path}")
