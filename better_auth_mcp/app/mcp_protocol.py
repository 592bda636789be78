from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

MCP_PROTOCOL_VERSION = "2025-06-18"


@dataclass(slots=True, frozen=True)
class McpTool:
    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass(slots=True, frozen=True)
class McpResource:
    uri: str
    name: str
    description: str
    mime_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "uri": self.uri,
            "mimeType": self.mime_type,
            "name": self.name,
            "description": self.description,
        }


@dataclass(slots=True, frozen=True)
class McpTextContent:
    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass(slots=True, frozen=True)
class McpResourceContents:
    uri: str
    mime_type: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"uri": self.uri, "mimeType": self.mime_type, "text": self.text}


@dataclass(slots=True, frozen=True)
class McpServerInfo:
    name: str
    version: str
    capabilities: dict[str, Any] = field(default_factory=lambda: {"tools": {}, "resources": {}})

    def to_initialize_result(self) -> dict[str, Any]:
        return {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": self.capabilities,
            "serverInfo": {"name": self.name, "version": self.version},
        }
