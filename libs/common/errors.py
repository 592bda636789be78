from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# JSON-RPC 2.0 표준 오류 코드예요.
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


@dataclass(slots=True)
class ErrorEnvelope:
    code: int
    message: str
    data: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class DomainError(Exception):
    def __init__(self, error_code: str, message: str, code: int = INTERNAL_ERROR) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.code = code


class MethodNotFoundError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__("METHOD_NOT_FOUND", message, code=METHOD_NOT_FOUND)


class ToolNotFoundError(MethodNotFoundError):
    """카탈로그에 없는 도구 이름으로 호출됐어요."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.error_code = "TOOL_NOT_FOUND"
        self.tool_name = tool_name


class InvalidRequestError(DomainError):
    """알 수 없는 리소스 URI나 스킴처럼 요청 자체가 잘못됐어요."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_REQUEST", message, code=INVALID_REQUEST)


class InvalidParamsError(DomainError):
    """JSON-RPC 메서드 파라미터 모양이 잘못됐어요."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_PARAMS", message, code=INVALID_PARAMS)


class InvalidArgumentsError(DomainError):
    """도구 인자가 입력 스키마와 맞지 않아요."""

    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__(
            "INVALID_ARGUMENTS",
            f"Invalid arguments for tool {tool_name}: {message}",
            code=INVALID_PARAMS,
        )
        self.tool_name = tool_name


class ExecutionFailureError(DomainError):
    """핸들러 실행 중 발생한 예외를 감싸요."""

    def __init__(self, message: str) -> None:
        super().__init__("EXECUTION_FAILED", message, code=INTERNAL_ERROR)


class ConfigurationError(DomainError):
    def __init__(self, message: str = "설정이 올바르지 않아요.") -> None:
        super().__init__("CONFIGURATION_ERROR", message, code=INTERNAL_ERROR)


def build_error_envelope(error: DomainError) -> ErrorEnvelope:
    return ErrorEnvelope(
        code=error.code,
        message=error.message,
        data={"error_code": error.error_code},
    )
