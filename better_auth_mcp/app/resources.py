"""`better-auth://` 스킴으로 읽을 수 있는 리소스 카탈로그예요.

리소스 이름은 URI의 호스트 자리에 들어가요. 예: ``better-auth://config``.
"""

from __future__ import annotations

import abc
import asyncio
import json
from collections import deque
from pathlib import Path
from typing import Protocol

from better_auth_mcp.app.config_store import AuthConfigStore
from better_auth_mcp.app.mcp_protocol import McpResource
from libs.common.errors import ConfigurationError

RESOURCE_SCHEME = "better-auth"
LOGS_PLACEHOLDER = "Better-Auth logs would be displayed here"


class LogSource(Protocol):
    async def read(self) -> str: ...


class PlaceholderLogSource:
    """로그 저장소가 연결되지 않았을 때 쓰는 고정 본문이에요."""

    async def read(self) -> str:
        return LOGS_PLACEHOLDER


class FileLogSource:
    """서버 자신의 로그 파일에서 마지막 `max_lines`줄을 읽어요."""

    def __init__(self, path: str | Path, *, max_lines: int = 200) -> None:
        self._path = Path(path)
        self._max_lines = max_lines

    async def read(self) -> str:
        return await asyncio.to_thread(self._tail)

    def _tail(self) -> str:
        if not self._path.is_file():
            return LOGS_PLACEHOLDER
        with self._path.open("r", encoding="utf-8", errors="replace") as handle:
            lines = deque(handle, maxlen=self._max_lines)
        if not lines:
            return LOGS_PLACEHOLDER
        return "".join(lines).rstrip("\n")


class BaseResource(abc.ABC):
    @property
    @abc.abstractmethod
    def host(self) -> str:
        """URI 호스트 자리에 들어가는 리소스 이름이에요."""

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @property
    @abc.abstractmethod
    def description(self) -> str: ...

    @property
    @abc.abstractmethod
    def mime_type(self) -> str: ...

    @property
    def uri(self) -> str:
        return f"{RESOURCE_SCHEME}://{self.host}"

    @abc.abstractmethod
    async def read(self) -> str:
        """리소스 본문을 텍스트로 반환해요."""

    def to_descriptor(self) -> McpResource:
        return McpResource(
            uri=self.uri,
            name=self.name,
            description=self.description,
            mime_type=self.mime_type,
        )


class ConfigResource(BaseResource):
    def __init__(self, *, config_store: AuthConfigStore) -> None:
        self._config_store = config_store

    @property
    def host(self) -> str:
        return "config"

    @property
    def name(self) -> str:
        return "Better-Auth Configuration"

    @property
    def description(self) -> str:
        return "Current Better-Auth configuration settings"

    @property
    def mime_type(self) -> str:
        return "application/json"

    async def read(self) -> str:
        config = await self._config_store.snapshot()
        return json.dumps(config.to_dict(), indent=2)


class LogsResource(BaseResource):
    def __init__(self, *, log_source: LogSource) -> None:
        self._log_source = log_source

    @property
    def host(self) -> str:
        return "logs"

    @property
    def name(self) -> str:
        return "Better-Auth Logs"

    @property
    def description(self) -> str:
        return "Authentication system logs"

    @property
    def mime_type(self) -> str:
        return "text/plain"

    async def read(self) -> str:
        return await self._log_source.read()


class ResourceCatalog:
    """호스트 이름으로 리소스를 찾는 카탈로그예요. 등록 순서가 목록 순서예요."""

    def __init__(self, *, scheme: str = RESOURCE_SCHEME) -> None:
        self.scheme = scheme
        self._resources: dict[str, BaseResource] = {}

    def register(self, resource: BaseResource) -> None:
        if resource.host in self._resources:
            raise ConfigurationError(f"이미 등록된 리소스예요: {resource.uri}")
        self._resources[resource.host] = resource

    def get(self, host: str) -> BaseResource | None:
        return self._resources.get(host)

    def list_descriptors(self) -> list[McpResource]:
        return [resource.to_descriptor() for resource in self._resources.values()]

    def __len__(self) -> int:
        return len(self._resources)


def build_default_resource_catalog(
    *,
    config_store: AuthConfigStore,
    log_source: LogSource | None = None,
) -> ResourceCatalog:
    catalog = ResourceCatalog()
    catalog.register(ConfigResource(config_store=config_store))
    catalog.register(LogsResource(log_source=log_source or PlaceholderLogSource()))
    return catalog
