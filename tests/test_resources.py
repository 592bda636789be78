from __future__ import annotations

import json
from pathlib import Path

import pytest
from better_auth_mcp.app.config_store import AuthConfig, AuthConfigStore
from better_auth_mcp.app.dispatcher import Dispatcher
from better_auth_mcp.app.resources import (
    LOGS_PLACEHOLDER,
    FileLogSource,
    build_default_resource_catalog,
)
from better_auth_mcp.app.tools.defaults import build_default_tool_registry

from libs.common.errors import INTERNAL_ERROR, INVALID_REQUEST, ExecutionFailureError, InvalidRequestError


class _BrokenLogSource:
    async def read(self) -> str:
        raise OSError("log storage unavailable")


def test_list_resources_returns_config_then_logs(dispatcher: Dispatcher) -> None:
    resources = [resource.to_dict() for resource in dispatcher.list_resources()]
    assert resources == [
        {
            "uri": "better-auth://config",
            "mimeType": "application/json",
            "name": "Better-Auth Configuration",
            "description": "Current Better-Auth configuration settings",
        },
        {
            "uri": "better-auth://logs",
            "mimeType": "text/plain",
            "name": "Better-Auth Logs",
            "description": "Authentication system logs",
        },
    ]
    assert [r.to_dict() for r in dispatcher.list_resources()] == resources


@pytest.mark.asyncio
async def test_read_config_returns_pretty_json(config_store: AuthConfigStore, dispatcher: Dispatcher) -> None:
    await config_store.replace(AuthConfig(project_id="p1", api_key="k1", environment="staging"))
    contents = await dispatcher.read_resource("better-auth://config")
    assert len(contents) == 1
    assert contents[0].uri == "better-auth://config"
    assert contents[0].mime_type == "application/json"
    assert contents[0].text == json.dumps(
        {"projectId": "p1", "apiKey": "k1", "environment": "staging"},
        indent=2,
    )


@pytest.mark.asyncio
async def test_read_logs_without_source_returns_placeholder(dispatcher: Dispatcher) -> None:
    contents = await dispatcher.read_resource("better-auth://logs")
    assert contents[0].mime_type == "text/plain"
    assert contents[0].text == LOGS_PLACEHOLDER


@pytest.mark.asyncio
async def test_unknown_scheme_is_invalid_request(dispatcher: Dispatcher) -> None:
    with pytest.raises(InvalidRequestError) as exc_info:
        await dispatcher.read_resource("other-scheme://config")
    assert exc_info.value.code == INVALID_REQUEST
    assert exc_info.value.message == "Unknown protocol: other-scheme:"


@pytest.mark.asyncio
async def test_unknown_host_is_invalid_request(dispatcher: Dispatcher) -> None:
    with pytest.raises(InvalidRequestError) as exc_info:
        await dispatcher.read_resource("better-auth://unknown-host")
    assert exc_info.value.message == "Unknown resource: unknown-host"


@pytest.mark.asyncio
async def test_resource_host_is_case_sensitive(dispatcher: Dispatcher) -> None:
    with pytest.raises(InvalidRequestError) as exc_info:
        await dispatcher.read_resource("better-auth://CONFIG")
    assert exc_info.value.message == "Unknown resource: CONFIG"


@pytest.mark.asyncio
async def test_userinfo_and_port_are_stripped_from_host(dispatcher: Dispatcher) -> None:
    contents = await dispatcher.read_resource("better-auth://user@logs:8080")
    assert contents[0].text == LOGS_PLACEHOLDER


@pytest.mark.asyncio
async def test_path_component_is_ignored(dispatcher: Dispatcher) -> None:
    contents = await dispatcher.read_resource("better-auth://logs/today")
    assert contents[0].text == LOGS_PLACEHOLDER


@pytest.mark.parametrize("uri", ["", "config", "better-auth:config", "better-auth://[broken"])
@pytest.mark.asyncio
async def test_malformed_uri_is_invalid_request(dispatcher: Dispatcher, uri: str) -> None:
    with pytest.raises(InvalidRequestError):
        await dispatcher.read_resource(uri)


@pytest.mark.asyncio
async def test_log_source_failure_is_execution_failure(config_store: AuthConfigStore) -> None:
    dispatcher = Dispatcher(
        registry=build_default_tool_registry(config_store=config_store),
        resources=build_default_resource_catalog(config_store=config_store, log_source=_BrokenLogSource()),
    )
    with pytest.raises(ExecutionFailureError) as exc_info:
        await dispatcher.read_resource("better-auth://logs")
    assert exc_info.value.code == INTERNAL_ERROR
    assert exc_info.value.message == "Resource read failed: log storage unavailable"


# ─── FileLogSource ───


@pytest.mark.asyncio
async def test_file_log_source_returns_last_lines(tmp_path: Path) -> None:
    log_file = tmp_path / "better-auth-mcp.log"
    log_file.write_text("".join(f"line {i}\n" for i in range(10)), encoding="utf-8")
    source = FileLogSource(log_file, max_lines=3)
    assert await source.read() == "line 7\nline 8\nline 9"


@pytest.mark.asyncio
async def test_file_log_source_missing_file_returns_placeholder(tmp_path: Path) -> None:
    source = FileLogSource(tmp_path / "missing.log")
    assert await source.read() == LOGS_PLACEHOLDER


@pytest.mark.asyncio
async def test_file_log_source_empty_file_returns_placeholder(tmp_path: Path) -> None:
    log_file = tmp_path / "empty.log"
    log_file.write_text("", encoding="utf-8")
    assert await FileLogSource(log_file).read() == LOGS_PLACEHOLDER
