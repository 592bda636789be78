"""HTTP JSON-RPC 전송 계층 테스트예요."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from better_auth_mcp.app.main import create_app
from better_auth_mcp.app.settings import Settings
from fastapi.testclient import TestClient

from libs.common.errors import INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND, PARSE_ERROR


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_app(Settings(_env_file=None, log_file=""))
    with TestClient(app) as test_client:
        yield test_client


def _rpc(client: TestClient, method: str, params: dict[str, Any] | None = None, rpc_id: int = 1) -> dict[str, Any]:
    payload: dict[str, Any] = {"jsonrpc": "2.0", "id": rpc_id, "method": method}
    if params is not None:
        payload["params"] = params
    response = client.post("/mcp", json=payload)
    assert response.status_code == 200
    return response.json()


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_initialize_reports_server_info(client: TestClient) -> None:
    body = _rpc(client, "initialize", {"clientInfo": {"name": "pytest", "version": "1.0"}})
    assert body["id"] == 1
    assert body["result"]["serverInfo"] == {"name": "better-auth-mcp-server", "version": "0.1.0"}
    assert set(body["result"]["capabilities"]) == {"tools", "resources"}


def test_tools_list_is_idempotent(client: TestClient) -> None:
    first = _rpc(client, "tools/list")["result"]["tools"]
    second = _rpc(client, "tools/list")["result"]["tools"]
    assert first == second
    assert [tool["name"] for tool in first][:2] == ["analyze_project", "setup_better_auth"]
    assert "inputSchema" in first[0]


def test_tools_call_returns_text_content(client: TestClient) -> None:
    body = _rpc(client, "tools/call", {"name": "test_auth_flows", "arguments": {"flows": ["login", "2fa"]}})
    assert body["result"] == {
        "content": [{"type": "text", "text": "Auth flow tests completed for: login, 2fa"}]
    }


def test_unknown_tool_returns_method_not_found(client: TestClient) -> None:
    body = _rpc(client, "tools/call", {"name": "does_not_exist", "arguments": {}}, rpc_id=7)
    assert body["id"] == 7
    assert "result" not in body
    assert body["error"]["code"] == METHOD_NOT_FOUND
    assert body["error"]["message"] == "Unknown tool: does_not_exist"


def test_invalid_arguments_return_invalid_params(client: TestClient) -> None:
    body = _rpc(client, "tools/call", {"name": "generate_migration_plan", "arguments": {"projectPath": "/app", "currentAuthType": "okta"}})
    assert body["error"]["code"] == INVALID_PARAMS
    assert "currentAuthType" in body["error"]["message"]


def test_tools_call_without_name_is_invalid_params(client: TestClient) -> None:
    body = _rpc(client, "tools/call", {"arguments": {}})
    assert body["error"]["code"] == INVALID_PARAMS
    assert body["error"]["message"] == "tools/call requires a string 'name' parameter"


def test_tools_call_with_non_object_arguments_is_invalid_params(client: TestClient) -> None:
    body = _rpc(client, "tools/call", {"name": "test_auth_flows", "arguments": ["login"]})
    assert body["error"]["code"] == INVALID_PARAMS


def test_resources_read_without_uri_is_invalid_params(client: TestClient) -> None:
    body = _rpc(client, "resources/read", {})
    assert body["error"]["code"] == INVALID_PARAMS


def test_config_resource_reflects_setup(client: TestClient) -> None:
    _rpc(client, "tools/call", {"name": "setup_better_auth", "arguments": {"projectPath": "/app", "config": {"projectId": "p1", "apiKey": "k1"}}})
    body = _rpc(client, "resources/read", {"uri": "better-auth://config"})
    contents = body["result"]["contents"]
    assert contents[0]["uri"] == "better-auth://config"
    assert contents[0]["mimeType"] == "application/json"
    assert '"projectId": "p1"' in contents[0]["text"]


def test_resources_list(client: TestClient) -> None:
    resources = _rpc(client, "resources/list")["result"]["resources"]
    assert [resource["uri"] for resource in resources] == ["better-auth://config", "better-auth://logs"]


def test_read_unknown_scheme_is_invalid_request(client: TestClient) -> None:
    body = _rpc(client, "resources/read", {"uri": "other-scheme://config"})
    assert body["error"]["code"] == INVALID_REQUEST


def test_unknown_method_is_method_not_found(client: TestClient) -> None:
    body = _rpc(client, "prompts/list")
    assert body["error"]["code"] == METHOD_NOT_FOUND


def test_ping(client: TestClient) -> None:
    assert _rpc(client, "ping")["result"] == {}


def test_notification_is_accepted_without_body(client: TestClient) -> None:
    response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert response.status_code == 202
    assert response.content == b""


def test_malformed_json_is_parse_error(client: TestClient) -> None:
    response = client.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.json()["error"]["code"] == PARSE_ERROR
    assert response.json()["id"] is None


def test_envelope_without_method_is_invalid_request(client: TestClient) -> None:
    response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 3})
    assert response.json() == {
        "jsonrpc": "2.0",
        "id": 3,
        "error": {"code": INVALID_REQUEST, "message": "Invalid Request"},
    }


def test_null_id_is_treated_as_request(client: TestClient) -> None:
    response = client.post("/mcp", json={"jsonrpc": "2.0", "id": None, "method": "ping"})
    assert response.status_code == 200
    assert response.json() == {"jsonrpc": "2.0", "id": None, "result": {}}
