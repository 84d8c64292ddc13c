"""
AutoTestID workflow entry point.

Pure per-call function ``(html, strategy, template_loader) -> report``:
- no strategy: instructional template (when found) or the built-in Phase-1 prompt
- unrecognised strategy: invalid-strategy notice + Phase-1 prompt
- aria-first / test-attribute-first: Phase-2 report with code preview
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from .scanner import scan
from .strategy import (
    STRATEGY_NAMES,
    evaluate,
    invalid_strategy_notice,
    parse_strategy,
    strategy_selection_prompt,
)

logger = logging.getLogger("mcp.autotestid.workflow")

MISSING_HTML_MESSAGE = "Please provide HTML content to add locator attributes."
WORKFLOW_HEADER = "AUTOTESTID WORKFLOW - Two-Phase Processing"

TemplateLoader = Callable[[], str]

_STRATEGY_IN_TEXT_RE = re.compile(
    "|".join(re.escape(name) for name in sorted(STRATEGY_NAMES, key=len, reverse=True)),
    re.IGNORECASE,
)


def resolve_strategy(strategy: str | None = None, user_request: str | None = None) -> str | None:
    """Pick the raw strategy string for a call.

    An explicit ``strategy`` wins (returned as-is so invalid values can be
    reported); otherwise the first strategy name mentioned in ``user_request``.
    """
    if strategy is not None and strategy.strip():
        return strategy
    if user_request:
        match = _STRATEGY_IN_TEXT_RE.search(user_request)
        if match:
            return match.group(0).lower()
    return None


def run_workflow(
    html: str | None,
    strategy: str | None = None,
    *,
    template_loader: TemplateLoader | None = None,
) -> str:
    if not html or not html.strip():
        return MISSING_HTML_MESSAGE

    selected = parse_strategy(strategy)
    if selected is not None:
        logger.info("workflow strategy=%s", selected.value)
        return evaluate(scan(html), selected)

    if strategy is not None and strategy.strip():
        logger.info("workflow invalid_strategy=%r", strategy)
        return f"{invalid_strategy_notice(strategy)}\n\n{strategy_selection_prompt(html)}"

    template = template_loader() if template_loader is not None else ""
    if template:
        return f"{WORKFLOW_HEADER}\n\nHTML Content to Process: {html}\n\n{template}"
    return strategy_selection_prompt(html)


__all__ = ["MISSING_HTML_MESSAGE", "WORKFLOW_HEADER", "TemplateLoader", "resolve_strategy", "run_workflow"]
