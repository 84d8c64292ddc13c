"""Before/after code preview shared by both strategies."""

from __future__ import annotations

from collections.abc import Sequence

from .elements import (
    DECISION_ADD_ARIA,
    DECISION_EXISTING_ARIA,
    DECISION_EXISTING_TEST_ID,
    InteractiveElement,
)

PREVIEW_LIMIT = 5


def insert_attributes(markup: str, attributes: str) -> str:
    """Insert ``attributes`` right before the ``>`` (or ``/>``) closing the opening tag."""
    end = markup.find(">")
    if end < 0:
        return markup
    cut = end - 1 if end > 0 and markup[end - 1] == "/" else end
    head = markup[:cut].rstrip()
    tail = markup[cut:]
    sep = " " if tail.startswith("/") else ""
    return f"{head} {attributes}{sep}{tail}"


def render_after(element: InteractiveElement) -> str:
    if element.decision == DECISION_EXISTING_ARIA:
        return "// NO CHANGES NEEDED - sufficient ARIA/semantic targeting\n"
    if element.decision == DECISION_EXISTING_TEST_ID:
        return "// NO CHANGES NEEDED - existing data-testid preserved\n"
    if element.decision == DECISION_ADD_ARIA:
        attrs = f'aria-label="{element.suggested_aria_label}" role="{element.suggested_aria_role}"'
        return f"// AFTER (with ARIA only):\n{insert_attributes(element.full_element, attrs)}\n"
    attrs = f'data-testid="{element.suggested_test_id}"'
    return f"// AFTER (with test ID only):\n{insert_attributes(element.full_element, attrs)}\n"


def render_code_preview(elements: Sequence[InteractiveElement], limit: int = PREVIEW_LIMIT) -> str:
    if not elements:
        return "No elements to preview."

    chunks = ["### Code Preview:\n\n"]
    for element in elements[:limit]:
        chunks.append(f"**{element.element_type}:**\n")
        chunks.append("```html\n")
        chunks.append(f"// BEFORE:\n{element.full_element}\n\n")
        chunks.append(render_after(element))
        chunks.append("```\n\n")

    if len(elements) > limit:
        chunks.append(f"... and {len(elements) - limit} more elements\n")
    return "".join(chunks)


__all__ = ["PREVIEW_LIMIT", "insert_attributes", "render_after", "render_code_preview"]
