"""Render user-facing contract docs.

Kept as a real module (not an ad-hoc script helper) so tests can verify that
`contracts/tools.md` is always in sync with the live `tools/list` output.
"""

from __future__ import annotations

from typing import Any


def render_tools_markdown(snapshot: dict[str, Any]) -> str:
    tools = snapshot.get("tools") or []
    lines: list[str] = []
    lines.append("# MCP Tool Contract")
    lines.append("")
    lines.append(f"- protocolVersion: `{snapshot.get('protocolVersion')}`")

    server_info = snapshot.get("serverInfo") or {}
    lines.append(f"- server: `{server_info.get('name')}` v`{server_info.get('version')}`")
    lines.append(f"- tools: `{len(tools)}`")
    lines.append("")

    lines.append("## Tools")
    lines.append("")
    lines.append("| name | description |")
    lines.append("|---|---|")
    for tool in tools:
        if not isinstance(tool, dict):
            continue
        name = str(tool.get("name", ""))
        desc = str(tool.get("description", "")).strip().splitlines()[0] if tool.get("description") else ""
        desc = desc.replace("|", "\\|")
        lines.append(f"| `{name}` | {desc} |")

    lines.append("")
    lines.append("## Arguments")
    lines.append("")
    for tool in tools:
        if not isinstance(tool, dict):
            continue
        schema = tool.get("inputSchema") or {}
        required = set(schema.get("required") or [])
        lines.append(f"### `{tool.get('name')}`")
        lines.append("")
        for arg, spec in (schema.get("properties") or {}).items():
            kind = spec.get("type", "any")
            if spec.get("enum"):
                kind += " (" + " / ".join(f"`{v}`" for v in spec["enum"]) + ")"
            flag = "required" if arg in required else "optional"
            lines.append(f"- `{arg}`: {kind}, {flag}")
        lines.append("")

    lines.append("## Notes")
    lines.append("")
    lines.append("- `tools/list` is the source of truth for the tool list and input schemas.")
    lines.append("- Tool outputs are returned as MCP `content[]` items of type `text`.")
    lines.append(
        "- Invalid arguments surface as JSON-RPC `-32602`; unexpected faults as `-32603` with the message in `error.data`."
    )

    return "\n".join(lines) + "\n"
