"""
Locator-suggestion tools.

Each module provides focused functionality:
- elements: InteractiveElement record and the category table
- scanner: tag-pattern scanning and data-testid suggestions
- strategy: aria-first / test-attribute-first decisions and reports
- preview: before/after code preview
- prompt_template: instructional template lookup
- workflow: the per-call entry point tying everything together
"""

from .elements import ELEMENT_CATEGORIES, ElementCategory, InteractiveElement
from .preview import render_code_preview
from .prompt_template import PromptTemplate, default_candidates
from .scanner import scan, suggest_test_id
from .strategy import Strategy, apply_strategy, evaluate, parse_strategy, strategy_selection_prompt
from .workflow import MISSING_HTML_MESSAGE, resolve_strategy, run_workflow

__all__ = [
    "ELEMENT_CATEGORIES",
    "ElementCategory",
    "InteractiveElement",
    "MISSING_HTML_MESSAGE",
    "PromptTemplate",
    "Strategy",
    "apply_strategy",
    "default_candidates",
    "evaluate",
    "parse_strategy",
    "render_code_preview",
    "resolve_strategy",
    "run_workflow",
    "scan",
    "strategy_selection_prompt",
    "suggest_test_id",
]
