from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from better_auth_mcp.app.dispatcher import Dispatcher
from better_auth_mcp.app.mcp_protocol import McpServerInfo
from libs.common.errors import PARSE_ERROR, InvalidParamsError, InvalidRequestError, MethodNotFoundError
from libs.common.logging import get_logger
from libs.contracts.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse

router = APIRouter()
logger = get_logger("better_auth_mcp.routes")

RpcHandler = Callable[[Request, dict[str, Any]], Awaitable[dict[str, Any]]]


def _get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher  # type: ignore[no-any-return]


def _get_server_info(request: Request) -> McpServerInfo:
    return request.app.state.server_info  # type: ignore[no-any-return]


def _require_str(params: dict[str, Any], key: str, method: str) -> str:
    value = params.get(key)
    if not isinstance(value, str) or not value:
        raise InvalidParamsError(f"{method} requires a string '{key}' parameter")
    return value


async def _initialize(request: Request, params: dict[str, Any]) -> dict[str, Any]:
    client_info = params.get("clientInfo")
    if isinstance(client_info, dict):
        logger.info("client_initialized", client_name=client_info.get("name"), client_version=client_info.get("version"))
    return _get_server_info(request).to_initialize_result()


async def _ping(request: Request, params: dict[str, Any]) -> dict[str, Any]:
    del request, params
    return {}


async def _list_tools(request: Request, params: dict[str, Any]) -> dict[str, Any]:
    del params
    return {"tools": [tool.to_dict() for tool in _get_dispatcher(request).list_tools()]}


async def _call_tool(request: Request, params: dict[str, Any]) -> dict[str, Any]:
    name = _require_str(params, "name", "tools/call")
    arguments = params.get("arguments")
    if arguments is not None and not isinstance(arguments, dict):
        raise InvalidParamsError("tools/call 'arguments' must be an object")
    result = await _get_dispatcher(request).call_tool(name, arguments)
    return result.to_dict()


async def _list_resources(request: Request, params: dict[str, Any]) -> dict[str, Any]:
    del params
    return {"resources": [resource.to_dict() for resource in _get_dispatcher(request).list_resources()]}


async def _read_resource(request: Request, params: dict[str, Any]) -> dict[str, Any]:
    uri = _require_str(params, "uri", "resources/read")
    contents = await _get_dispatcher(request).read_resource(uri)
    return {"contents": [item.to_dict() for item in contents]}


RPC_HANDLERS: dict[str, RpcHandler] = {
    "initialize": _initialize,
    "ping": _ping,
    "tools/list": _list_tools,
    "tools/call": _call_tool,
    "resources/list": _list_resources,
    "resources/read": _read_resource,
}


def _protocol_error(code: int, message: str, rpc_id: str | int | None = None) -> JSONResponse:
    response = JsonRpcResponse(id=rpc_id, error=JsonRpcError(code=code, message=message))
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.to_payload())


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/mcp")
async def handle_rpc(request: Request) -> Response:
    """JSON-RPC 요청 하나를 받아 디스패처로 넘겨요.

    `DomainError`는 여기서 잡지 않아요. `register_exception_handlers`가 요청 id를 붙여
    JSON-RPC 오류 응답으로 바꿔요.
    """
    try:
        body = json.loads(await request.body())
    except ValueError:
        return _protocol_error(PARSE_ERROR, "Parse error")

    try:
        rpc = JsonRpcRequest.model_validate(body)
    except ValidationError:
        rpc_id = body.get("id") if isinstance(body, dict) else None
        error = InvalidRequestError("Invalid Request")
        return _protocol_error(error.code, error.message, rpc_id if isinstance(rpc_id, (str, int)) else None)

    if rpc.is_notification:
        logger.info("rpc_notification", rpc_method=rpc.method)
        return Response(status_code=status.HTTP_202_ACCEPTED)

    request.state.rpc_id = rpc.id
    request.state.rpc_method = rpc.method
    handler = RPC_HANDLERS.get(rpc.method)
    if handler is None:
        raise MethodNotFoundError(f"Method not found: {rpc.method}")

    result = await handler(request, rpc.params or {})
    return JSONResponse(content=JsonRpcResponse(id=rpc.id, result=result).to_payload())
