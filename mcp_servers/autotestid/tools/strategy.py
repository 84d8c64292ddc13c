"""
Strategy engine: decides per element whether to suggest ARIA attributes, a
``data-testid``, or nothing, and renders the Phase-1 / Phase-2 reports.

Strategies:
- aria-first: ARIA label/role preferred; data-testid only when ARIA is insufficient.
  An element never gets both.
- test-attribute-first: data-testid on every interactive element that lacks one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from enum import Enum

from .elements import (
    DECISION_ADD_ARIA,
    DECISION_ADD_TEST_ID,
    DECISION_EXISTING_ARIA,
    DECISION_EXISTING_TEST_ID,
    DECISION_TEST_ID,
    InteractiveElement,
)
from .preview import render_code_preview
from .scanner import attribute_value

logger = logging.getLogger("mcp.autotestid.strategy")


class Strategy(str, Enum):
    ARIA_FIRST = "aria-first"
    TEST_ATTRIBUTE_FIRST = "test-attribute-first"


STRATEGY_NAMES: tuple[str, ...] = tuple(s.value for s in Strategy)

_ARIA_ROLES: dict[str, str] = {
    "button": "button",
    "submit button": "button",
    "text input": "textbox",
    "password input": "textbox",
    "email input": "textbox",
    "checkbox": "checkbox",
    "radio button": "radio",
    "select": "combobox",
    "textarea": "textbox",
    "link": "link",
}
_DEFAULT_ARIA_ROLE = "button"


def parse_strategy(raw: str | None) -> Strategy | None:
    """Map a caller-supplied string to a Strategy (None when blank or unrecognised)."""
    key = (raw or "").strip().lower()
    if not key:
        return None
    try:
        return Strategy(key)
    except ValueError:
        return None


# ═══════════════════════════════════════════════════════════════════════════════
# ARIA suggestions
# ═══════════════════════════════════════════════════════════════════════════════


def suggest_aria_label(element: InteractiveElement) -> str:
    if element.inner_text.strip():
        return f"{element.inner_text.strip()} {element.element_type}"

    placeholder = attribute_value(element.attributes, "placeholder")
    if placeholder is not None:
        return f"Enter {placeholder.lower()}"

    value = attribute_value(element.attributes, "value")
    if value is not None:
        return f"{value} {element.element_type}"

    name = attribute_value(element.attributes, "name")
    if name is not None:
        return f"{name.replace('_', ' ')} {element.element_type}"

    return element.element_type.replace("-", " ")


def suggest_aria_role(element: InteractiveElement) -> str:
    return _ARIA_ROLES.get(element.element_type.lower(), _DEFAULT_ARIA_ROLE)


# ═══════════════════════════════════════════════════════════════════════════════
# Per-element decisions
# ═══════════════════════════════════════════════════════════════════════════════


def decide_aria_first(element: InteractiveElement) -> InteractiveElement:
    """Apply the aria-first decision order; first matching rule wins."""
    label = element.aria_label
    role = element.aria_role
    text = element.inner_text

    if element.has_aria_label and label.strip():
        return replace(
            element,
            needs_test_id=False,
            decision=DECISION_EXISTING_ARIA,
            strategy_reason=f"Sufficient ARIA label: '{label}' - no test ID needed",
        )
    if element.has_aria_role and role.strip() and text.strip():
        return replace(
            element,
            needs_test_id=False,
            decision=DECISION_EXISTING_ARIA,
            strategy_reason=f"ARIA role '{role}' with meaningful text content - no test ID needed",
        )
    if element.has_aria_role and role.strip():
        return replace(
            element,
            needs_test_id=False,
            decision=DECISION_EXISTING_ARIA,
            strategy_reason=f"ARIA role '{role}' sufficient - no test ID needed",
        )
    if text.strip() and len(text) > 2:
        return replace(
            element,
            needs_test_id=False,
            decision=DECISION_ADD_ARIA,
            strategy_reason="Will add ARIA attributes for accessibility - no test ID needed",
            suggested_aria_label=suggest_aria_label(element),
            suggested_aria_role=suggest_aria_role(element),
        )
    return replace(
        element,
        needs_test_id=True,
        decision=DECISION_TEST_ID,
        strategy_reason="ARIA attributes insufficient for reliable targeting - needs test ID",
        suggested_aria_label="",
        suggested_aria_role="",
    )


def decide_test_attribute_first(element: InteractiveElement) -> InteractiveElement:
    if element.has_existing_test_id:
        return replace(
            element,
            needs_test_id=False,
            decision=DECISION_EXISTING_TEST_ID,
            strategy_reason="preserved existing test ID",
        )
    return replace(
        element,
        needs_test_id=True,
        decision=DECISION_ADD_TEST_ID,
        strategy_reason=f"needs data-testid '{element.suggested_test_id}'",
    )


def apply_strategy(elements: Sequence[InteractiveElement], strategy: Strategy) -> list[InteractiveElement]:
    if strategy is Strategy.ARIA_FIRST:
        decided = [decide_aria_first(e) for e in elements]
        logger.info(
            "ARIA analysis complete: %d elements with ARIA, %d need test IDs",
            sum(1 for e in decided if e.has_aria_label or e.has_aria_role),
            sum(1 for e in decided if e.needs_test_id),
        )
        return decided
    return [decide_test_attribute_first(e) for e in elements]


# ═══════════════════════════════════════════════════════════════════════════════
# Reports
# ═══════════════════════════════════════════════════════════════════════════════


def strategy_selection_prompt(html: str) -> str:
    """Phase 1: ask the caller to pick a strategy, echoing their HTML verbatim."""
    return (
        "\n"
        "🎯 **AutoTestID Workflow - Phase 1: Strategy Selection**\n"
        "\n"
        "Before analyzing or modifying HTML code, please choose your locator strategy:\n"
        "\n"
        "**Option 1: Type `aria-first`**\n"
        "- Prioritize ARIA roles and labels for accessibility-first approach\n"
        "- Add `data-testid` only when ARIA attributes are insufficient\n"
        "- Best for user-centric testing and accessibility compliance\n"
        "\n"
        "**Option 2: Type `test-attribute-first`**\n"
        "- Add `data-testid` to all interactive elements for explicit test targeting\n"
        "- Consistent coverage regardless of ARIA presence\n"
        "- Best for comprehensive test automation coverage\n"
        "\n"
        "**HTML Content to Process:**\n"
        f"{html}\n"
        "\n"
        "**Please respond with either `aria-first` or `test-attribute-first` to proceed to Phase 2.**\n"
    )


def invalid_strategy_notice(raw: str) -> str:
    return f"Invalid strategy '{raw}'. Please choose 'aria-first' or 'test-attribute-first'."


def _lines(elements: Sequence[InteractiveElement], render: Callable[[InteractiveElement], str]) -> str:
    return "\n".join(f"• [{e.position}] {e.element_type} {render(e)}" for e in elements)


def _section(
    title: str, elements: Sequence[InteractiveElement], render: Callable[[InteractiveElement], str]
) -> list[str]:
    out = [f"**{title}:** {len(elements)}"]
    if elements:
        out.append(_lines(elements, render))
    out.append("")
    return out


def render_aria_first_report(elements: Sequence[InteractiveElement]) -> str:
    sufficient = [e for e in elements if e.decision == DECISION_EXISTING_ARIA]
    needs_id = [e for e in elements if e.decision == DECISION_TEST_ID]
    aria_added = [e for e in elements if e.decision == DECISION_ADD_ARIA]

    parts = ["🎯 **ARIA-First Strategy Results**", ""]
    parts += _section(
        "Elements with sufficient ARIA/semantic targeting", sufficient, lambda e: f"- {e.strategy_reason}"
    )
    parts += _section("Elements needing data-testid", needs_id, lambda e: f"→ {e.suggested_test_id}")
    parts += _section(
        "ARIA attributes added",
        aria_added,
        lambda e: f'→ aria-label="{e.suggested_aria_label}" role="{e.suggested_aria_role}"',
    )
    parts.append(
        "**Recommendation:** ARIA-first approach - add ARIA attributes OR data-testid, never both to same element"
    )
    parts.append("**Next Step:** Review and confirm the ARIA enhancements OR selective test ID additions")
    return "\n".join(parts)


def render_test_attribute_first_report(elements: Sequence[InteractiveElement]) -> str:
    existing = [e for e in elements if e.decision == DECISION_EXISTING_TEST_ID]
    needs_id = [e for e in elements if e.decision == DECISION_ADD_TEST_ID]

    parts = ["🎯 **Test-Attribute-First Strategy Results**", ""]
    parts += _section("Elements with existing data-testid", existing, lambda e: "- preserved existing test ID")
    parts += _section("Elements needing data-testid", needs_id, lambda e: f"→ {e.suggested_test_id}")
    parts.append(f"**Total Coverage:** {len(elements)} interactive elements identified")
    parts.append("**Naming Convention:** kebab-case with context and element type")
    parts.append("")
    parts.append(
        "**Recommendation:** Comprehensive test coverage with explicit locator attributes for all interactive elements"
    )
    parts.append("**Next Step:** Review and confirm the complete test ID additions")
    return "\n".join(parts)


def evaluate(elements: Sequence[InteractiveElement], strategy: Strategy) -> str:
    """Phase 2: decide per element and render the report plus the code preview."""
    decided = apply_strategy(elements, strategy)
    if strategy is Strategy.ARIA_FIRST:
        report = render_aria_first_report(decided)
    else:
        report = render_test_attribute_first_report(decided)
    return f"{report}\n\n{render_code_preview(decided)}"


__all__ = [
    "STRATEGY_NAMES",
    "Strategy",
    "apply_strategy",
    "decide_aria_first",
    "decide_test_attribute_first",
    "evaluate",
    "invalid_strategy_notice",
    "parse_strategy",
    "render_aria_first_report",
    "render_test_attribute_first_report",
    "strategy_selection_prompt",
    "suggest_aria_label",
    "suggest_aria_role",
]
