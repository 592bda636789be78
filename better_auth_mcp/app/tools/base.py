"""도구의 추상 기반 클래스예요.

새 도구를 추가하려면 `BaseTool`을 상속하고 `name`, `description`,
`input_schema`, `execute`를 구현하면 돼요. 스키마와 핸들러가 한 객체에 있어서
카탈로그에 보이는 도구는 항상 실행 가능해요.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any

from better_auth_mcp.app.mcp_protocol import McpTextContent, McpTool

PROJECT_PATH_PROPERTY: dict[str, Any] = {
    "type": "string",
    "description": "Path to the project root",
}


@dataclass(slots=True, frozen=True)
class ToolResult:
    """도구 실행 결과예요. 콘텐츠 블록 순서가 그대로 응답에 실려요."""

    content: tuple[McpTextContent, ...]

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=(McpTextContent(text=text),))

    def to_dict(self) -> dict[str, Any]:
        return {"content": [block.to_dict() for block in self.content]}


class BaseTool(abc.ABC):
    """모든 도구가 구현해야 하는 추상 클래스예요.

    확장 방법:
        1. `BaseTool`을 상속하는 클래스를 만들어요.
        2. `name`, `description`, `input_schema` 프로퍼티를 구현해요.
        3. `execute` 메서드에 실제 로직을 작성해요.
        4. `ToolRegistry.register()`로 등록하면 끝이에요.

    `execute`가 받는 인자는 디스패처가 `input_schema`로 이미 검증한 상태예요.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """도구의 고유 이름이에요. 클라이언트가 호출할 때 사용돼요."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """도구가 무엇을 하는지 설명하는 문장이에요."""

    @property
    @abc.abstractmethod
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema 형식의 입력 파라미터 정의예요.

        예시::

            {
                "type": "object",
                "properties": {
                    "projectPath": {"type": "string", "description": "Path to the project root"},
                },
                "required": ["projectPath"],
            }
        """

    @abc.abstractmethod
    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        """도구를 실행하고 결과를 반환해요.

        실패하면 예외를 그대로 올려요. 디스패처가 프로토콜 오류로 바꿔요.
        """

    def to_descriptor(self) -> McpTool:
        return McpTool(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
        )
