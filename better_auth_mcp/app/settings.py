from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BETTER_AUTH_MCP_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    service_name: str = "better-auth-mcp-server"
    server_version: str = "0.1.0"
    # production이 아니면 stderr 콘솔 로그를 함께 남겨요.
    environment: str = "development"
    log_level: str = "INFO"
    # 빈 문자열이면 파일 로그를 끄고 logs 리소스는 고정 본문을 돌려줘요.
    log_file: str = "better-auth-mcp.log"
    logs_resource_max_lines: int = 200
    host: str = "127.0.0.1"
    port: int = 8082
    workspace_root: str = "."
    # 시작 시 한 번 읽어서 setup_better_auth 호출로만 주입해요.
    project_id: str | None = None
    api_key: str | None = None
    auth_environment: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value

    @property
    def console_logging_enabled(self) -> bool:
        return self.environment != "production"

    @property
    def has_startup_auth_config(self) -> bool:
        return bool(self.project_id) and bool(self.api_key)


settings = Settings()
