from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from mcp_servers.autotestid import main as mcp_server
from mcp_servers.autotestid.config import AutoTestIdConfig
from mcp_servers.autotestid.server.contract import DEFAULT_PROTOCOL_VERSION, SERVER_INFO, contract_snapshot
from mcp_servers.autotestid.server.contract_docs import render_tools_markdown
from mcp_servers.autotestid.server.definitions import TOOL_NAME
from mcp_servers.autotestid.tools.strategy import STRATEGY_NAMES

CONTRACTS = Path(__file__).resolve().parent.parent / "contracts"
REGENERATE = "run `python3 scripts/generate_contracts.py`"


def _committed_snapshot() -> dict[str, Any]:
    return json.loads((CONTRACTS / "tools.json").read_text(encoding="utf-8"))


def test_contract_json_is_in_sync() -> None:
    assert _committed_snapshot() == contract_snapshot(), f"Contract drift: {REGENERATE}"


def test_contract_markdown_is_in_sync() -> None:
    on_disk = (CONTRACTS / "tools.md").read_text(encoding="utf-8")
    assert on_disk == render_tools_markdown(contract_snapshot()), f"Doc drift: {REGENERATE}"


def test_committed_contract_describes_the_workflow_tool() -> None:
    snapshot = _committed_snapshot()
    assert snapshot["protocolVersion"] == DEFAULT_PROTOCOL_VERSION
    assert snapshot["serverInfo"] == SERVER_INFO

    (tool,) = snapshot["tools"]
    assert tool["name"] == TOOL_NAME
    schema = tool["inputSchema"]
    assert schema["required"] == ["html_content"]
    assert list(schema["properties"]) == ["html_content", "user_request", "strategy"]
    assert schema["properties"]["strategy"]["enum"] == list(STRATEGY_NAMES)


def test_markdown_lists_every_argument_with_its_requirement() -> None:
    doc = render_tools_markdown(contract_snapshot())
    assert f"| `{TOOL_NAME}` | Two-phase AutoTestID workflow:" in doc
    assert "- `html_content`: string, required" in doc
    assert "- `user_request`: string, optional" in doc
    assert "- `strategy`: string (`aria-first` / `test-attribute-first`), optional" in doc


def test_tools_list_serves_the_committed_contract(monkeypatch: pytest.MonkeyPatch) -> None:
    sent: list[dict[str, Any]] = []
    monkeypatch.setattr(mcp_server, "_write_message", lambda payload: sent.append(payload))
    mcp_server.McpServer(AutoTestIdConfig(use_template=False)).handle_list_tools(request_id=1)
    assert sent[0]["result"]["tools"] == _committed_snapshot()["tools"]
