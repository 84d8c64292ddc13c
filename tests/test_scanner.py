from __future__ import annotations

import logging
import re

import pytest

from mcp_servers.autotestid.tools import scanner
from mcp_servers.autotestid.tools.elements import ELEMENT_TYPES, TEST_ID_SUFFIXES
from mcp_servers.autotestid.tools.scanner import scan, suggest_test_id

TEST_ID_SHAPE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*-(button|input|checkbox|radio|select|textarea|link)$")
BARE_SUFFIXES = set(TEST_ID_SUFFIXES)

LOGIN_FORM = """
<form id="login">
  <label>Email <input type="email" name="user_email" placeholder="Work email"></label>
  <input type="password" name="pwd">
  <input type="checkbox" id="remember_me"> Remember me
  <input type='radio' name="plan" value="Express">
  <select name="country"><option>US</option><option>DE</option></select>
  <textarea id="bio"></textarea>
  <a href="/forgot">Forgot password?</a>
  <button class="primary">
    Sign in
  </button>
  <input type="submit" value="Send">
</form>
"""


# ═══════════════════════════════════════════════════════════════════════════════
# SCENARIOS
# ═══════════════════════════════════════════════════════════════════════════════


def test_scan_single_button() -> None:
    elements = scan("<button>Save</button>")
    assert len(elements) == 1
    el = elements[0]
    assert el.position == 1
    assert el.offset == 0
    assert el.element_type == "button"
    assert el.inner_text == "Save"
    assert el.attributes == ""
    assert el.full_element == "<button>Save</button>"
    assert el.suggested_test_id == "save-button"
    assert el.needs_test_id is True


def test_scan_email_input_falls_back_to_element_type() -> None:
    elements = scan('<input type="email">')
    assert len(elements) == 1
    el = elements[0]
    assert el.element_type == "email input"
    assert el.inner_text == ""
    assert el.attributes == 'type="email"'
    assert el.suggested_test_id == "email-input"


@pytest.mark.parametrize("html", ["", "   ", "\n\t\n"])
def test_scan_blank_input_returns_empty_and_warns(html: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="mcp.autotestid.scanner"):
        assert scan(html) == []
    assert any("No HTML content" in r.getMessage() for r in caplog.records)


def test_scan_text_without_elements_returns_empty() -> None:
    assert scan("<div><p>Just text</p></div>") == []


def test_scan_full_form_types_and_ids() -> None:
    elements = scan(LOGIN_FORM)
    assert [e.element_type for e in elements] == [
        "email input",
        "password input",
        "checkbox",
        "radio button",
        "select",
        "textarea",
        "link",
        "button",
        "submit button",
    ]
    assert [e.suggested_test_id for e in elements] == [
        "work-email-input",
        "pwd-input",
        "remember-me-checkbox",
        "express-radio",
        "country-select",
        "bio-textarea",
        "forgot-password-link",
        "sign-in-button",
        "send-button",
    ]


def test_scan_orders_by_document_offset_not_category() -> None:
    html = '<a href="/home">Home</a>\n<input type="text" name="user_name">\n<button>Go</button>'
    elements = scan(html)
    assert [e.element_type for e in elements] == ["link", "text input", "button"]
    assert [e.position for e in elements] == [1, 2, 3]
    assert [e.suggested_test_id for e in elements] == ["home-link", "user-name-input", "go-button"]


def test_scan_multiline_button_text_is_trimmed() -> None:
    elements = scan('<button class="primary">\n  Submit order\n</button>')
    assert len(elements) == 1
    assert elements[0].inner_text == "Submit order"
    assert elements[0].attributes == 'class="primary"'
    assert elements[0].suggested_test_id == "submit-order-button"


def test_scan_paired_tags_are_non_greedy() -> None:
    elements = scan("<button>One</button><button>Two</button>")
    assert [e.full_element for e in elements] == ["<button>One</button>", "<button>Two</button>"]
    assert [e.suggested_test_id for e in elements] == ["one-button", "two-button"]


def test_scan_is_case_insensitive() -> None:
    elements = scan('<BUTTON>OK</BUTTON><INPUT TYPE="TEXT" NAME="Query">')
    assert [e.element_type for e in elements] == ["button", "text input"]
    assert [e.suggested_test_id for e in elements] == ["ok-button", "query-input"]


def test_scan_ignores_type_inside_other_attribute_names() -> None:
    elements = scan('<input data-type="email" type="text" name="q">')
    assert len(elements) == 1
    assert elements[0].element_type == "text input"


def test_scan_same_offset_overlap_keeps_first_category() -> None:
    elements = scan('<input type="text" type="email">')
    assert len(elements) == 1
    assert elements[0].element_type == "text input"


def test_scan_nested_input_inside_select_is_still_captured() -> None:
    elements = scan('<select name="s"><input type="text" name="inner"></select>')
    assert [e.element_type for e in elements] == ["select", "text input"]
    assert elements[0].offset < elements[1].offset


# ═══════════════════════════════════════════════════════════════════════════════
# ATTRIBUTE ANALYSIS
# ═══════════════════════════════════════════════════════════════════════════════


def test_scan_detects_existing_test_id_case_insensitively() -> None:
    elements = scan('<button data-testid="save">Save</button><button DATA-TESTID="x">X</button><button>Y</button>')
    assert [e.has_existing_test_id for e in elements] == [True, True, False]


def test_scan_extracts_aria_label_and_role() -> None:
    elements = scan('<button aria-label="Submit form">Go</button><a href="#" role="button">More</a>')
    button, link = elements
    assert button.has_aria_label is True
    assert button.aria_label == "Submit form"
    assert button.has_aria_role is False
    assert link.has_aria_role is True
    assert link.aria_role == "button"


def test_scan_does_not_treat_data_role_as_role() -> None:
    el = scan('<button data-role="menu">Menu</button>')[0]
    assert el.has_aria_role is False
    assert el.aria_role == ""


def test_scan_input_text_prefers_placeholder_then_value() -> None:
    elements = scan(
        '<input type="text" placeholder="Search" value="ignored">'
        '<input type="submit" value="Send">'
        '<input type="checkbox">'
    )
    assert [e.inner_text for e in elements] == ["Search", "Send", ""]


def test_scan_select_inner_text_is_first_text_run() -> None:
    el = scan('<select name="country"><option>US</option></select>')[0]
    assert el.inner_text == ""


def test_id_attribute_fallback_ignores_data_testid() -> None:
    el = scan('<button data-testid="legacy"></button>')[0]
    assert el.suggested_test_id == "button"


# ═══════════════════════════════════════════════════════════════════════════════
# TEST ID SUGGESTIONS
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("inner_text", "attributes", "element_type", "suffix", "expected"),
    [
        ("Sign In", "", "button", "button", "sign-in-button"),
        ("Hello   World!!", "", "button", "button", "hello-world-button"),
        ("", 'name="first_name"', "text input", "input", "first-name-input"),
        ("", 'id="Main_Nav"', "link", "link", "main-nav-link"),
        ("", 'name="" id="zip"', "text input", "input", "zip-input"),
        ("", "", "email input", "input", "email-input"),
        ("", "", "button", "button", "button"),
        ("", "", "radio button", "radio", "radio-button-radio"),
        ("___", "", "button", "button", "button"),
        ("保存", "", "button", "button", "button"),
    ],
)
def test_suggest_test_id(inner_text: str, attributes: str, element_type: str, suffix: str, expected: str) -> None:
    assert suggest_test_id(inner_text, attributes, element_type, suffix) == expected


def test_suggested_ids_match_kebab_shape() -> None:
    html = LOGIN_FORM + "<button></button><button>保存</button><input type='radio'><a href='#'>Ünïcode &amp; more</a>"
    elements = scan(html)
    assert elements
    for el in elements:
        tid = el.suggested_test_id
        assert TEST_ID_SHAPE.match(tid) or tid in BARE_SUFFIXES, tid


# ═══════════════════════════════════════════════════════════════════════════════
# PROPERTIES & FAULTS
# ═══════════════════════════════════════════════════════════════════════════════


def test_scan_offsets_strictly_increase_and_positions_are_contiguous() -> None:
    html = LOGIN_FORM * 2 + '<input type="text" type="email"><button>Dup</button><button>Dup</button>'
    elements = scan(html)
    offsets = [e.offset for e in elements]
    assert all(a < b for a, b in zip(offsets, offsets[1:]))
    assert [e.position for e in elements] == list(range(1, len(elements) + 1))
    assert {e.element_type for e in elements} <= set(ELEMENT_TYPES)


def test_scan_is_idempotent() -> None:
    assert scan(LOGIN_FORM) == scan(LOGIN_FORM)


def test_scan_fault_is_logged_and_yields_empty(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    def boom(html: str) -> list:
        raise RuntimeError("regex engine exploded")

    monkeypatch.setattr(scanner, "_collect", boom)
    with caplog.at_level(logging.ERROR, logger="mcp.autotestid.scanner"):
        assert scan("<button>Save</button>") == []
    assert any(r.levelno == logging.ERROR and r.exc_info for r in caplog.records)


def test_scan_malformed_markup_does_not_raise() -> None:
    html = "<button><input type=text <select></a href=><textarea>"
    assert isinstance(scan(html), list)
