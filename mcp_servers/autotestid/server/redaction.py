"""Redaction utilities for logging and frame-dumps.

Tool arguments carry whole HTML documents: logs get a truncated preview with
password-input values masked, never the raw markup.
"""

from __future__ import annotations

import copy
import re
from typing import Any

REDACTED = "<redacted>"
LOG_PREVIEW_CHARS = 120
DUMP_PREVIEW_CHARS = 2000

_SENSITIVE_SUBSTRINGS = ("token", "secret", "password", "passwd", "api-key", "api_key", "apikey", "cookie")

_INPUT_TAG_RE = re.compile(r"<input\b[^>]*>", re.IGNORECASE | re.DOTALL)
_PASSWORD_TYPE_RE = re.compile(r"(?<![\w-])type=[\"']?password\b", re.IGNORECASE)
_VALUE_ATTR_RE = re.compile(r"((?<![\w-])value=)([\"'])[^\"']*\2", re.IGNORECASE)


def is_sensitive_key(key: str) -> bool:
    k = (key or "").strip().lower()
    return bool(k) and any(s in k for s in _SENSITIVE_SUBSTRINGS)


def truncate(value: str, limit: int = LOG_PREVIEW_CHARS) -> str:
    if len(value) <= limit:
        return value
    return f"{value[:limit]}… <{len(value)} chars>"


def mask_password_values(html: str) -> str:
    """Mask ``value`` attributes of password inputs."""

    def _mask(match: re.Match[str]) -> str:
        tag = match.group(0)
        if not _PASSWORD_TYPE_RE.search(tag):
            return tag
        return _VALUE_ATTR_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}{REDACTED}{m.group(2)}", tag)

    return _INPUT_TAG_RE.sub(_mask, html)


def redact_tool_arguments(name: str, arguments: Any, limit: int = LOG_PREVIEW_CHARS) -> Any:
    if not isinstance(arguments, dict):
        return arguments
    out: dict[str, Any] = {}
    for key, value in arguments.items():
        if is_sensitive_key(str(key)):
            out[key] = REDACTED
        elif key == "html_content" and isinstance(value, str):
            out[key] = truncate(mask_password_values(value), limit)
        elif isinstance(value, str):
            out[key] = truncate(value, limit)
        else:
            out[key] = value
    return out


def _redact_message(message: Any, limit: int) -> Any:
    if not isinstance(message, dict):
        return message
    safe = copy.deepcopy(message)
    params = safe.get("params")
    if isinstance(params, dict) and "arguments" in params:
        params["arguments"] = redact_tool_arguments(str(params.get("name") or ""), params["arguments"], limit)
    result = safe.get("result")
    if isinstance(result, dict) and isinstance(result.get("content"), list):
        for item in result["content"]:
            if isinstance(item, dict) and isinstance(item.get("text"), str):
                item["text"] = truncate(mask_password_values(item["text"]), limit)
    return safe


def redact_jsonrpc_for_log(message: Any) -> Any:
    return _redact_message(message, LOG_PREVIEW_CHARS)


def redact_jsonrpc_for_dump(message: Any) -> Any:
    return _redact_message(message, DUMP_PREVIEW_CHARS)


__all__ = [
    "REDACTED",
    "is_sensitive_key",
    "mask_password_values",
    "redact_jsonrpc_for_dump",
    "redact_jsonrpc_for_log",
    "redact_tool_arguments",
    "truncate",
]
