from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConfigStatus(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"


@dataclass(slots=True, frozen=True)
class AuthConfig:
    project_id: str | None = None
    api_key: str | None = None
    environment: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AuthConfig":
        """`setup_better_auth`의 `config` 인자에서 만들어요. 모르는 키는 버려요."""
        return cls(
            project_id=payload.get("projectId"),
            api_key=payload.get("apiKey"),
            environment=payload.get("environment"),
        )

    def to_dict(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        if self.project_id is not None:
            payload["projectId"] = self.project_id
        if self.api_key is not None:
            payload["apiKey"] = self.api_key
        if self.environment is not None:
            payload["environment"] = self.environment
        return payload


class AuthConfigStore:
    """프로세스 전체에서 공유하는 Better-Auth 설정 보관소예요.

    쓰는 쪽은 `setup_better_auth` 도구, 읽는 쪽은 `better-auth://config` 리소스뿐이에요.
    `replace`는 병합하지 않고 통째로 교체해요. 새 설정에 빠진 필드(예: apiKey)는 사라져요.
    """

    def __init__(self, initial: AuthConfig | None = None) -> None:
        self._lock = asyncio.Lock()
        self._config = initial if initial is not None else AuthConfig()
        self._status = ConfigStatus.CONFIGURED if initial is not None else ConfigStatus.UNCONFIGURED

    @property
    def status(self) -> ConfigStatus:
        return self._status

    async def replace(self, config: AuthConfig) -> AuthConfig:
        """설정을 교체하고 이전 값을 반환해요."""
        async with self._lock:
            previous = self._config
            self._config = config
            self._status = ConfigStatus.CONFIGURED
            return previous

    async def snapshot(self) -> AuthConfig:
        async with self._lock:
            return self._config
