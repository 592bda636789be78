from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import cast

import structlog
from structlog.typing import FilteringBoundLogger


def configure_logging(
    *,
    level: str = "INFO",
    log_file: str | None = None,
    console: bool = True,
) -> None:
    """structlog을 stdlib 핸들러 위에 JSON 한 줄 형식으로 구성해요.

    stdout은 stdio 전송 계층이 MCP 메시지용으로 쓰기 때문에 콘솔 출력은 항상 stderr로 보내요.
    """
    handlers: list[logging.Handler] = []
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(format="%(message)s", handlers=handlers, level=numeric_level, force=True)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    return cast(FilteringBoundLogger, structlog.get_logger(name))
