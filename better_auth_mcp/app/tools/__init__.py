from better_auth_mcp.app.tools.base import BaseTool, ToolResult
from better_auth_mcp.app.tools.registry import ToolRegistry

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "ToolResult",
]
