"""
Tool handlers organized by domain.

All handlers follow the signature: (config, arguments) -> ToolResult
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .workflow import WORKFLOW_HANDLERS

if TYPE_CHECKING:
    from ..registry import HandlerFunc

ALL_HANDLERS: dict[str, HandlerFunc] = {
    **WORKFLOW_HANDLERS,
}

__all__ = ["ALL_HANDLERS", "WORKFLOW_HANDLERS"]
