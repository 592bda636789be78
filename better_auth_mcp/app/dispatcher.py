from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from better_auth_mcp.app.mcp_protocol import McpResource, McpResourceContents, McpTool
from better_auth_mcp.app.resources import BaseResource, ResourceCatalog
from better_auth_mcp.app.tools.base import ToolResult
from better_auth_mcp.app.tools.registry import ToolRegistry
from libs.common.errors import (
    ExecutionFailureError,
    InvalidArgumentsError,
    InvalidRequestError,
    ToolNotFoundError,
)
from libs.common.logging import get_logger

logger = get_logger("better_auth_mcp.dispatcher")


def _failure_message(prefix: str, exc: Exception) -> str:
    return f"{prefix}: {str(exc) or 'Unknown error'}"


class Dispatcher:
    """도구 호출과 리소스 읽기 요청을 카탈로그에 맞춰 실행해요.

    반환값은 성공 결과 하나이고, 실패는 항상 `DomainError` 하위 예외 하나로 올라가요.
    요청 단위 예외는 여기서 모두 감싸기 때문에 전송 계층 밖으로 새지 않아요.
    """

    def __init__(self, *, registry: ToolRegistry, resources: ResourceCatalog) -> None:
        self._registry = registry
        self._resources = resources

    def list_tools(self) -> list[McpTool]:
        return self._registry.list_descriptors()

    def list_resources(self) -> list[McpResource]:
        return self._resources.list_descriptors()

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        tool = self._registry.get(name)
        if tool is None:
            logger.warning("tool_not_found", tool=name)
            raise ToolNotFoundError(name)

        payload = dict(arguments) if arguments else {}
        try:
            self._registry.validate(name, payload)
        except InvalidArgumentsError as exc:
            logger.warning("tool_arguments_invalid", tool=name, message=exc.message)
            raise

        logger.info("tool_call_started", tool=name)
        try:
            result = await tool.execute(payload)
        except Exception as exc:
            logger.exception("tool_call_failed", tool=name, error=str(exc))
            raise ExecutionFailureError(_failure_message("Tool execution failed", exc)) from exc
        logger.info("tool_call_completed", tool=name)
        return result

    async def read_resource(self, uri: str) -> list[McpResourceContents]:
        resource = self._resolve_resource(uri)
        try:
            text = await resource.read()
        except Exception as exc:
            logger.exception("resource_read_failed", uri=uri, error=str(exc))
            raise ExecutionFailureError(_failure_message("Resource read failed", exc)) from exc
        logger.info("resource_read", uri=uri)
        return [McpResourceContents(uri=uri, mime_type=resource.mime_type, text=text)]

    def _resolve_resource(self, uri: str) -> BaseResource:
        try:
            parts = urlsplit(uri)
        except ValueError as exc:
            logger.warning("resource_uri_invalid", uri=uri)
            raise InvalidRequestError(f"Invalid resource URI: {uri}") from exc

        if not parts.scheme or not parts.netloc:
            logger.warning("resource_uri_invalid", uri=uri)
            raise InvalidRequestError(f"Invalid resource URI: {uri}")
        if parts.scheme != self._resources.scheme:
            logger.warning("resource_protocol_unknown", uri=uri, scheme=parts.scheme)
            raise InvalidRequestError(f"Unknown protocol: {parts.scheme}:")

        # hostname은 소문자로 바꾸니까 netloc에서 대소문자 그대로 꺼내요.
        host = parts.netloc.rpartition("@")[2].partition(":")[0]
        resource = self._resources.get(host)
        if resource is None:
            logger.warning("resource_not_found", uri=uri, host=host)
            raise InvalidRequestError(f"Unknown resource: {host}")
        return resource
