"""로그 분석과 인증 흐름 모니터링 도구예요."""

from __future__ import annotations

from typing import Any

from better_auth_mcp.app.tools.base import BaseTool, ToolResult
from libs.common.logging import get_logger

logger = get_logger("better_auth_mcp.tools.debugging")


class AnalyzeLogsTool(BaseTool):
    @property
    def name(self) -> str:
        return "analyze_logs"

    @property
    def description(self) -> str:
        return "Analyze Better-Auth logs for issues"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "timeRange": {
                    "type": "string",
                    "description": "Time range to analyze (e.g. '24h', '7d')",
                },
            },
            "required": ["timeRange"],
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        time_range = arguments["timeRange"]
        logger.info("analyzing_logs", time_range=time_range)
        return ToolResult.text(f"Log analysis complete for time range: {time_range}")


class MonitorAuthFlowsTool(BaseTool):
    @property
    def name(self) -> str:
        return "monitor_auth_flows"

    @property
    def description(self) -> str:
        return "Real-time monitoring of authentication processes"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "duration": {
                    "type": "string",
                    "description": "Monitoring duration (e.g. '1h', '30m')",
                },
            },
            "required": ["duration"],
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        duration = arguments["duration"]
        logger.info("monitoring_auth_flows", duration=duration)
        return ToolResult.text(f"Auth flow monitoring complete for duration: {duration}")
