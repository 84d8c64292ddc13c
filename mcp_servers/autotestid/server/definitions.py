"""AutoTestID workflow tool schema definition."""

from __future__ import annotations

from typing import Any

from ..tools.strategy import STRATEGY_NAMES

TOOL_NAME = "autotestid_workflow"

AUTOTESTID_WORKFLOW_TOOL: dict[str, Any] = {
    "name": TOOL_NAME,
    "description": """Two-phase AutoTestID workflow: add ARIA attributes OR data-testid locators to interactive HTML elements (never both).
PHASE 1 (no strategy): returns the strategy selection prompt for the given HTML.
PHASE 2 (strategy chosen): scans buttons, inputs, checkboxes, radios, selects, textareas and links, then reports per element:
- aria-first: keep sufficient ARIA labels/roles, suggest aria-label + role where text allows, data-testid only when ARIA is insufficient
- test-attribute-first: preserve existing data-testid, suggest kebab-case data-testid for every other element
USAGE:
- autotestid_workflow(html_content="<button>Save</button>")
- autotestid_workflow(html_content="...", strategy="aria-first")
- autotestid_workflow(html_content="...", user_request="use test-attribute-first")""",
    "inputSchema": {
        "type": "object",
        "properties": {
            "html_content": {
                "type": "string",
                "description": "The HTML content to analyze and apply AutoTestID workflow to",
            },
            "user_request": {
                "type": "string",
                "description": "Optional user request or context; may name the strategy (aria-first or test-attribute-first)",
            },
            "strategy": {
                "type": "string",
                "enum": list(STRATEGY_NAMES),
                "description": "Locator strategy for Phase 2; omit to get the Phase 1 selection prompt",
            },
        },
        "required": ["html_content"],
    },
}

TOOL_DEFINITIONS: list[dict[str, Any]] = [AUTOTESTID_WORKFLOW_TOOL]

__all__ = ["AUTOTESTID_WORKFLOW_TOOL", "TOOL_DEFINITIONS", "TOOL_NAME"]
