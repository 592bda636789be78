"""도구 `input_schema`에서 인자 검증기를 만들어요.

목록 조회에 내보내는 스키마와 호출 시 검증하는 스키마가 같은 객체예요.
"""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError, best_match

from libs.common.errors import ConfigurationError, InvalidArgumentsError


def check_input_schema(tool_name: str, schema: dict[str, Any]) -> None:
    """등록 시점에 스키마 자체가 올바른지 확인해요.

    JSON Schema 문법 오류와 함께, `required`에 있지만 `properties`에 없는 이름도 거부해요.
    """
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as exc:
        raise ConfigurationError(f"{tool_name} 도구의 입력 스키마가 올바르지 않아요: {exc.message}") from exc
    _check_required_subset(tool_name, schema, path="")


def _check_required_subset(tool_name: str, schema: dict[str, Any], *, path: str) -> None:
    properties = schema.get("properties", {})
    required = schema.get("required", [])
    missing = [name for name in required if name not in properties]
    if missing:
        location = path or "<root>"
        raise ConfigurationError(
            f"{tool_name} 도구 스키마 {location}의 required에 정의되지 않은 속성이 있어요: {', '.join(missing)}"
        )
    for name, subschema in properties.items():
        if isinstance(subschema, dict) and subschema.get("type") == "object":
            _check_required_subset(tool_name, subschema, path=f"{path}.{name}" if path else name)


def _format_path(error_path: Any) -> str:
    parts = [str(part) for part in error_path]
    return ".".join(parts) if parts else "<root>"


class ArgumentValidator:
    def __init__(self, tool_name: str, schema: dict[str, Any]) -> None:
        self._tool_name = tool_name
        self._validator = Draft7Validator(schema)

    def validate(self, arguments: dict[str, Any]) -> None:
        error = best_match(self._validator.iter_errors(arguments))
        if error is None:
            return
        raise InvalidArgumentsError(self._tool_name, f"{_format_path(error.absolute_path)}: {error.message}")
