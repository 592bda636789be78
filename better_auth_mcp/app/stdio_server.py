"""공식 `mcp` SDK의 저수준 서버에 디스패처를 연결하는 stdio 전송 계층이에요.

메시지 프레이밍과 initialize 핸드셰이크는 SDK가 맡고, 여기서는 요청을 디스패처로
넘기고 `DomainError`를 `McpError`로 바꾸기만 해요.
"""

from __future__ import annotations

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from better_auth_mcp.app.dispatcher import Dispatcher
from libs.common.errors import DomainError
from libs.common.logging import get_logger

logger = get_logger("better_auth_mcp.stdio")


def to_mcp_error(exc: DomainError) -> McpError:
    return McpError(types.ErrorData(code=exc.code, message=exc.message))


class StdioMcpServer:
    def __init__(self, dispatcher: Dispatcher, *, name: str, version: str) -> None:
        self._dispatcher = dispatcher
        self._server: Server = Server(name, version=version)
        # 데코레이터 대신 직접 등록해요. SDK의 call_tool 데코레이터는 예외를 isError 결과로
        # 바꿔버려서 MethodNotFound 같은 프로토콜 오류 코드를 잃어요.
        self._server.request_handlers[types.ListToolsRequest] = self._handle_list_tools
        self._server.request_handlers[types.CallToolRequest] = self._handle_call_tool
        self._server.request_handlers[types.ListResourcesRequest] = self._handle_list_resources
        self._server.request_handlers[types.ReadResourceRequest] = self._handle_read_resource

    @property
    def server(self) -> Server:
        return self._server

    async def run(self) -> None:
        logger.info("stdio_transport_starting")
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(
                read_stream,
                write_stream,
                self._server.create_initialization_options(),
            )

    async def _handle_list_tools(self, req: types.ListToolsRequest) -> types.ServerResult:
        del req
        tools = [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema,
            )
            for descriptor in self._dispatcher.list_tools()
        ]
        return types.ServerResult(types.ListToolsResult(tools=tools))

    async def _handle_call_tool(self, req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await self._dispatcher.call_tool(req.params.name, req.params.arguments)
        except DomainError as exc:
            raise to_mcp_error(exc) from exc
        content = [types.TextContent(type="text", text=block.text) for block in result.content]
        return types.ServerResult(types.CallToolResult(content=content))

    async def _handle_list_resources(self, req: types.ListResourcesRequest) -> types.ServerResult:
        del req
        resources = [
            types.Resource(
                uri=descriptor.uri,
                name=descriptor.name,
                description=descriptor.description,
                mimeType=descriptor.mime_type,
            )
            for descriptor in self._dispatcher.list_resources()
        ]
        return types.ServerResult(types.ListResourcesResult(resources=resources))

    async def _handle_read_resource(self, req: types.ReadResourceRequest) -> types.ServerResult:
        try:
            contents = await self._dispatcher.read_resource(str(req.params.uri))
        except DomainError as exc:
            raise to_mcp_error(exc) from exc
        return types.ServerResult(
            types.ReadResourceResult(
                contents=[
                    types.TextResourceContents(uri=item.uri, mimeType=item.mime_type, text=item.text)
                    for item in contents
                ]
            )
        )
