"""기존 auth.js/next-auth 구성을 분석하고 이전 계획을 만드는 도구예요."""

from __future__ import annotations

from typing import Any

from better_auth_mcp.app.tools.base import PROJECT_PATH_PROPERTY, BaseTool, ToolResult
from libs.common.logging import get_logger

logger = get_logger("better_auth_mcp.tools.migration")

SUPPORTED_AUTH_TYPES = ("auth.js", "next-auth")


class AnalyzeCurrentAuthTool(BaseTool):
    @property
    def name(self) -> str:
        return "analyze_current_auth"

    @property
    def description(self) -> str:
        return "Detect and analyze existing auth.js/next-auth implementation"

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
        logger.info("analyzing_current_auth", project_path=project_path)
        return ToolResult.text(f"Auth analysis complete for {project_path}")


class GenerateMigrationPlanTool(BaseTool):
    @property
    def name(self) -> str:
        return "generate_migration_plan"

    @property
    def description(self) -> str:
        return "Create step-by-step migration plan from existing auth to Better-Auth"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "projectPath": dict(PROJECT_PATH_PROPERTY),
                "currentAuthType": {
                    "type": "string",
                    "description": "Current authentication system type",
                    "enum": list(SUPPORTED_AUTH_TYPES),
                },
            },
            "required": ["projectPath", "currentAuthType"],
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        auth_type = arguments["currentAuthType"]
        logger.info(
            "generating_migration_plan",
            project_path=arguments["projectPath"],
            current_auth_type=auth_type,
        )
        return ToolResult.text(f"Migration plan generated for {auth_type}")
