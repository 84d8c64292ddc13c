"""
Element model for the locator-suggestion engine.

Provides:
- ElementCategory: one interactive tag pattern with its element type and id suffix
- ELEMENT_CATEGORIES: the fixed, ordered category table used by the scanner
- InteractiveElement: immutable record for one scanned tag instance
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Decision buckets set by strategy evaluation.
DECISION_UNEVALUATED = "unevaluated"
DECISION_EXISTING_ARIA = "existing-aria"
DECISION_ADD_ARIA = "add-aria"
DECISION_TEST_ID = "test-id"
DECISION_EXISTING_TEST_ID = "existing-test-id"
DECISION_ADD_TEST_ID = "add-test-id"

_FLAGS = re.IGNORECASE | re.DOTALL


def _input_pattern(input_type: str) -> re.Pattern[str]:
    # `type=` must not be the tail of another attribute name (e.g. data-type=).
    return re.compile(rf"<input\b[^>]*(?<![\w-])type=[\"']?{input_type}[\"']?[^>]*>", _FLAGS)


@dataclass(slots=True, frozen=True)
class ElementCategory:
    """One interactive element category."""

    element_type: str
    suffix: str
    pattern: re.Pattern[str]

    @property
    def is_input_like(self) -> bool:
        """Inputs carry their text in placeholder/value instead of child text."""
        kind = self.element_type
        return "input" in kind or "checkbox" in kind or kind.startswith("radio")


ELEMENT_CATEGORIES: tuple[ElementCategory, ...] = (
    ElementCategory("button", "button", re.compile(r"<button\b[^>]*>(.*?)</button>", _FLAGS)),
    ElementCategory("text input", "input", _input_pattern("text")),
    ElementCategory("password input", "input", _input_pattern("password")),
    ElementCategory("email input", "input", _input_pattern("email")),
    ElementCategory("checkbox", "checkbox", _input_pattern("checkbox")),
    ElementCategory("radio button", "radio", _input_pattern("radio")),
    ElementCategory("submit button", "button", _input_pattern("submit")),
    ElementCategory("select", "select", re.compile(r"<select\b[^>]*>.*?</select>", _FLAGS)),
    ElementCategory("textarea", "textarea", re.compile(r"<textarea\b[^>]*>.*?</textarea>", _FLAGS)),
    ElementCategory("link", "link", re.compile(r"<a\b[^>]*href=[^>]*>(.*?)</a>", _FLAGS)),
)

ELEMENT_TYPES: tuple[str, ...] = tuple(c.element_type for c in ELEMENT_CATEGORIES)
TEST_ID_SUFFIXES: tuple[str, ...] = tuple(dict.fromkeys(c.suffix for c in ELEMENT_CATEGORIES))


@dataclass(slots=True, frozen=True)
class InteractiveElement:
    """One scanned interactive tag instance.

    Records are produced fresh per analysis call; strategy evaluation returns
    updated copies via ``dataclasses.replace`` instead of mutating.
    """

    position: int
    offset: int
    element_type: str
    full_element: str
    attributes: str = ""
    inner_text: str = ""
    has_existing_test_id: bool = False
    has_aria_label: bool = False
    has_aria_role: bool = False
    aria_label: str = ""
    aria_role: str = ""
    suggested_test_id: str = ""
    needs_test_id: bool = True
    strategy_reason: str = ""
    decision: str = DECISION_UNEVALUATED
    suggested_aria_label: str = ""
    suggested_aria_role: str = ""


__all__ = [
    "DECISION_ADD_ARIA",
    "DECISION_ADD_TEST_ID",
    "DECISION_EXISTING_ARIA",
    "DECISION_EXISTING_TEST_ID",
    "DECISION_TEST_ID",
    "DECISION_UNEVALUATED",
    "ELEMENT_CATEGORIES",
    "ELEMENT_TYPES",
    "TEST_ID_SUFFIXES",
    "ElementCategory",
    "InteractiveElement",
]
