"""도구를 등록하고 조회하는 레지스트리예요."""

from __future__ import annotations

from typing import Any

from better_auth_mcp.app.mcp_protocol import McpTool
from better_auth_mcp.app.tools.base import BaseTool
from better_auth_mcp.app.tools.validation import ArgumentValidator, check_input_schema
from libs.common.errors import ConfigurationError


class ToolRegistry:
    """도구를 이름으로 관리하는 중앙 레지스트리예요.

    등록 순서가 곧 `tools/list` 응답 순서예요. 도구마다 입력 스키마에서 만든
    검증기를 함께 보관해요.

    사용법::

        registry = ToolRegistry()
        registry.register(AnalyzeProjectTool())

        descriptors = registry.list_descriptors()
        registry.validate("analyze_project", {"projectPath": "/srv/app"})
    """

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}
        self._validators: dict[str, ArgumentValidator] = {}

    def register(self, tool: BaseTool) -> None:
        """도구를 등록해요. 같은 이름이 이미 있으면 `ConfigurationError`를 올려요."""
        if tool.name in self._tools:
            raise ConfigurationError(f"이미 등록된 도구 이름이에요: {tool.name}")
        schema = tool.input_schema
        check_input_schema(tool.name, schema)
        self._tools[tool.name] = tool
        self._validators[tool.name] = ArgumentValidator(tool.name, schema)

    def get(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def list_names(self) -> list[str]:
        return list(self._tools.keys())

    def list_descriptors(self) -> list[McpTool]:
        return [tool.to_descriptor() for tool in self._tools.values()]

    def validate(self, name: str, arguments: dict[str, Any]) -> None:
        """등록된 도구의 스키마로 인자를 검증해요. 실패하면 `InvalidArgumentsError`를 올려요."""
        self._validators[name].validate(arguments)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools
