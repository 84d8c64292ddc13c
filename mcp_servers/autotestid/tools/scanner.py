"""
Interactive element scanner.

Tag-pattern scanning over flat HTML text (no DOM): each category pattern from
``ELEMENT_CATEGORIES`` is applied independently, the results are merged and
re-ordered by match offset, and a kebab-case ``data-testid`` suggestion is
precomputed for every element.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from .elements import ELEMENT_CATEGORIES, ElementCategory, InteractiveElement

logger = logging.getLogger("mcp.autotestid.scanner")

_OPENING_TAG_RE = re.compile(r"<\w+\s*([^>]*?)/?>")
_FIRST_TEXT_RUN_RE = re.compile(r">([^<]*)<", re.DOTALL)
_ARIA_LABEL_PRESENT_RE = re.compile(r"aria-label\s*=", re.IGNORECASE)
_ARIA_ROLE_PRESENT_RE = re.compile(r"(?<![\w-])role\s*=", re.IGNORECASE)
_ARIA_LABEL_VALUE_RE = re.compile(r"aria-label\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE)
_ARIA_ROLE_VALUE_RE = re.compile(r"(?<![\w-])role\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE)
_NOT_KEBAB_RE = re.compile(r"[^a-z0-9\-]")
_HYPHEN_RUN_RE = re.compile(r"-+")


def attribute_value(text: str, name: str) -> str | None:
    """Return the quoted value of attribute ``name`` in ``text`` (None when absent)."""
    match = re.search(rf"(?<![\w-]){re.escape(name)}=[\"']([^\"']*)[\"']", text, re.IGNORECASE)
    return match.group(1) if match else None


def extract_attributes(element: str) -> str:
    match = _OPENING_TAG_RE.match(element)
    return match.group(1).strip() if match else ""


def extract_inner_text(element: str, category: ElementCategory) -> str:
    if category.is_input_like:
        placeholder = attribute_value(element, "placeholder")
        if placeholder is not None:
            return placeholder
        value = attribute_value(element, "value")
        return value if value is not None else ""

    match = _FIRST_TEXT_RUN_RE.search(element)
    return match.group(1).strip() if match else ""


def _normalize(raw: str) -> str:
    return raw.lower().replace(" ", "-").replace("_", "-").strip()


def suggest_test_id(inner_text: str, attributes: str, element_type: str, suffix: str) -> str:
    """Build a kebab-case ``data-testid`` suggestion.

    Base name preference: inner text, then the ``name`` attribute, then ``id``,
    then the element type itself. The category suffix is appended unless the
    cleaned base is empty (bare suffix) or the element-type fallback already
    ends with it.
    """
    base = _normalize(inner_text) if inner_text.strip() else ""

    if not base:
        name = attribute_value(attributes, "name")
        if name:
            base = _normalize(name)

    if not base:
        ident = attribute_value(attributes, "id")
        if ident:
            base = _normalize(ident)

    from_type = False
    if not base:
        base = element_type.replace(" ", "-")
        from_type = True

    base = _NOT_KEBAB_RE.sub("", base.lower())
    base = _HYPHEN_RUN_RE.sub("-", base).strip("-")

    if not base:
        return suffix
    if from_type and (base == suffix or base.endswith(f"-{suffix}")):
        return base
    return f"{base}-{suffix}"


def _build_element(match: re.Match[str], category: ElementCategory) -> InteractiveElement:
    full = match.group(0)
    attributes = extract_attributes(full)
    inner_text = extract_inner_text(full, category)

    has_label = bool(_ARIA_LABEL_PRESENT_RE.search(attributes))
    has_role = bool(_ARIA_ROLE_PRESENT_RE.search(attributes))
    label_match = _ARIA_LABEL_VALUE_RE.search(attributes) if has_label else None
    role_match = _ARIA_ROLE_VALUE_RE.search(attributes) if has_role else None

    return InteractiveElement(
        position=0,
        offset=match.start(),
        element_type=category.element_type,
        full_element=full,
        attributes=attributes,
        inner_text=inner_text,
        has_existing_test_id="data-testid" in full.lower(),
        has_aria_label=has_label,
        has_aria_role=has_role,
        aria_label=label_match.group(1) if label_match else "",
        aria_role=role_match.group(1) if role_match else "",
        suggested_test_id=suggest_test_id(inner_text, attributes, category.element_type, category.suffix),
    )


def _collect(html: str) -> list[InteractiveElement]:
    by_offset: dict[int, InteractiveElement] = {}
    for category in ELEMENT_CATEGORIES:
        for match in category.pattern.finditer(html):
            start = match.start()
            if start in by_offset:
                # Overlapping categories on irregular markup: first category in table order wins.
                logger.debug(
                    "scan_overlap offset=%d kept=%s dropped=%s",
                    start,
                    by_offset[start].element_type,
                    category.element_type,
                )
                continue
            by_offset[start] = _build_element(match, category)

    ordered: list[InteractiveElement] = []
    for position, offset in enumerate(sorted(by_offset), start=1):
        element = by_offset[offset]
        ordered.append(replace(element, position=position))
    return ordered


def scan(html: str) -> list[InteractiveElement]:
    """Find interactive elements in ``html`` in document order.

    Never raises for malformed input: faults are logged and yield an empty list.
    """
    if not html or not html.strip():
        logger.warning("No HTML content provided for analysis")
        return []

    try:
        elements = _collect(html)
    except Exception:
        logger.exception("Error analyzing interactive elements")
        return []

    logger.info("Found %d interactive elements in HTML", len(elements))
    return elements


__all__ = [
    "attribute_value",
    "extract_attributes",
    "extract_inner_text",
    "scan",
    "suggest_test_id",
    "logger",
]
