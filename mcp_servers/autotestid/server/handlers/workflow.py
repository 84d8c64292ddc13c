"""
AutoTestID workflow tool handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...tools.workflow import resolve_strategy, run_workflow
from ..definitions import TOOL_NAME
from ..errors import JsonRpcError
from ..types import ToolResult

if TYPE_CHECKING:
    from ...config import AutoTestIdConfig
    from ..registry import HandlerFunc


def _optional_str(args: dict[str, Any], key: str) -> str | None:
    value = args.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise JsonRpcError.invalid_params(f"{key} must be a string")
    return value


def handle_autotestid_workflow(config: AutoTestIdConfig, args: dict[str, Any]) -> ToolResult:
    html = args.get("html_content")
    if not isinstance(html, str) or not html.strip():
        raise JsonRpcError.invalid_params("html_content is required")

    strategy = resolve_strategy(_optional_str(args, "strategy"), _optional_str(args, "user_request"))
    text = run_workflow(html, strategy, template_loader=config.template_loader())
    return ToolResult.text(text)


WORKFLOW_HANDLERS: dict[str, HandlerFunc] = {
    TOOL_NAME: handle_autotestid_workflow,
}
