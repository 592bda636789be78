from __future__ import annotations

import argparse
import asyncio
import sys
from types import TracebackType
from typing import Any

import uvicorn

from better_auth_mcp.app.settings import Settings, settings
from better_auth_mcp.app.stdio_server import StdioMcpServer
from better_auth_mcp.bootstrap.container import build_runtime_components
from libs.common.logging import configure_logging, get_logger

logger = get_logger("better_auth_mcp.cli")


def _handle_uncaught_exception(
    exc_type: type[BaseException],
    exc: BaseException,
    tb: TracebackType | None,
) -> None:
    # 인터프리터가 곧 종료 코드 1로 끝나요. 여기서는 기록만 남겨요.
    logger.error("uncaught_exception", error=str(exc), exc_info=(exc_type, exc, tb))


def _handle_loop_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    exc = context.get("exception")
    logger.error(
        "unhandled_loop_exception",
        message=context.get("message"),
        error=str(exc) if exc is not None else None,
    )
    loop.stop()


async def _serve_stdio(app_settings: Settings) -> None:
    asyncio.get_running_loop().set_exception_handler(_handle_loop_exception)
    runtime = await build_runtime_components(app_settings)
    server = StdioMcpServer(
        runtime.dispatcher,
        name=app_settings.service_name,
        version=app_settings.server_version,
    )
    logger.info("server_started", transport="stdio", tools=len(runtime.tool_registry))
    await server.run()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Better-Auth MCP server (stdio)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Override BETTER_AUTH_MCP_LOG_LEVEL",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging(
        level=args.log_level or settings.log_level,
        log_file=settings.log_file or None,
        console=settings.console_logging_enabled,
    )
    sys.excepthook = _handle_uncaught_exception
    try:
        asyncio.run(_serve_stdio(settings))
    except KeyboardInterrupt:
        logger.info("server_stopped", transport="stdio")
    except Exception as exc:
        logger.exception("server_error", error=str(exc))
        sys.exit(1)


def main_http() -> None:
    uvicorn.run(
        "better_auth_mcp.app.main:build_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )
