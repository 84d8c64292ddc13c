from __future__ import annotations

import pytest

from mcp_servers.autotestid.tools.workflow import (
    MISSING_HTML_MESSAGE,
    WORKFLOW_HEADER,
    resolve_strategy,
    run_workflow,
)

HTML = '<button>Save</button><input type="email">'


def _never_called() -> str:
    raise AssertionError("template loader must not be consulted")


@pytest.mark.parametrize("html", [None, "", "   \n"])
def test_missing_html_yields_guidance(html: str | None) -> None:
    assert run_workflow(html, "aria-first", template_loader=_never_called) == MISSING_HTML_MESSAGE


def test_invalid_strategy_yields_notice_and_phase_one() -> None:
    out = run_workflow(HTML, "foo", template_loader=_never_called)
    assert out.startswith("Invalid strategy 'foo'. Please choose 'aria-first' or 'test-attribute-first'.")
    assert "Phase 1: Strategy Selection" in out
    assert HTML in out


def test_no_strategy_without_template_yields_phase_one() -> None:
    out = run_workflow(HTML, None, template_loader=lambda: "")
    assert "Phase 1: Strategy Selection" in out
    assert out.rstrip().endswith("to proceed to Phase 2.**")
    assert HTML in out


def test_no_strategy_without_loader_yields_phase_one() -> None:
    assert "Phase 1: Strategy Selection" in run_workflow(HTML)


def test_no_strategy_with_template_yields_instructions() -> None:
    out = run_workflow(HTML, "  ", template_loader=lambda: "# Steps\n1. Pick a strategy")
    assert out == f"{WORKFLOW_HEADER}\n\nHTML Content to Process: {HTML}\n\n# Steps\n1. Pick a strategy"


@pytest.mark.parametrize(
    ("strategy", "header"),
    [
        ("aria-first", "ARIA-First Strategy Results"),
        ("Test-Attribute-First", "Test-Attribute-First Strategy Results"),
    ],
)
def test_valid_strategy_yields_phase_two(strategy: str, header: str) -> None:
    out = run_workflow(HTML, strategy, template_loader=_never_called)
    assert header in out
    assert "### Code Preview:" in out


def test_phase_two_is_deterministic() -> None:
    assert run_workflow(HTML, "aria-first") == run_workflow(HTML, "aria-first")


@pytest.mark.parametrize(
    ("strategy", "user_request", "expected"),
    [
        ("aria-first", "use test-attribute-first", "aria-first"),
        ("bogus", None, "bogus"),
        (None, "Please go with TEST-ATTRIBUTE-FIRST", "test-attribute-first"),
        ("", "aria-first please", "aria-first"),
        (None, "add some test ids", None),
        (None, None, None),
    ],
)
def test_resolve_strategy(strategy: str | None, user_request: str | None, expected: str | None) -> None:
    assert resolve_strategy(strategy, user_request) == expected
