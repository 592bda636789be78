from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from libs.common.errors import INTERNAL_ERROR, DomainError, build_error_envelope
from libs.common.logging import get_logger
from libs.contracts.models import JsonRpcError, JsonRpcResponse


def _request_id(request: Request) -> str | int | None:
    return getattr(request.state, "rpc_id", None)


def register_exception_handlers(app: FastAPI, logger_name: str) -> None:
    """라우트에서 올라온 예외를 JSON-RPC 오류 응답으로 바꿔요.

    JSON-RPC는 프로토콜 오류도 HTTP 200으로 돌려주고, 예상하지 못한 예외만 500을 써요.
    """
    logger = get_logger(logger_name)

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        rpc_id = _request_id(request)
        logger.warning(
            "rpc_error",
            path=request.url.path,
            rpc_id=rpc_id,
            rpc_method=getattr(request.state, "rpc_method", None),
            error_code=exc.error_code,
            code=exc.code,
            message=exc.message,
        )
        envelope = build_error_envelope(exc)
        response = JsonRpcResponse(id=rpc_id, error=JsonRpcError(**envelope.to_dict()))
        return JSONResponse(status_code=200, content=response.to_payload())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unhandled_error",
            path=request.url.path,
            rpc_id=_request_id(request),
            error=str(exc),
        )
        response = JsonRpcResponse(
            id=_request_id(request),
            error=JsonRpcError(code=INTERNAL_ERROR, message="Internal error"),
        )
        return JSONResponse(status_code=500, content=response.to_payload())
