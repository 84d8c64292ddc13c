from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from .tools.prompt_template import DEFAULT_PROMPT_FILENAME, PromptTemplate

_PATH_SPLIT_RE = re.compile(rf"[,{re.escape(os.pathsep)}]")
_FALSE_VALUES = {"0", "false", "no", "off", "disabled"}


def parse_flag(raw: str | None, default: bool = True) -> bool:
    value = (raw or "").strip().lower()
    if not value:
        return default
    return value not in _FALSE_VALUES


def split_paths(raw: str | None) -> list[str]:
    return [part.strip() for part in _PATH_SPLIT_RE.split(raw or "") if part.strip()]


@dataclass
class AutoTestIdConfig:
    use_template: bool = True
    prompt_paths: list[str] = field(default_factory=list)
    prompt_filename: str = DEFAULT_PROMPT_FILENAME
    log_level: str = "INFO"

    @staticmethod
    def normalize_log_level(raw: str | None) -> str:
        level = (raw or "").strip().upper()
        if level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return level
        if level == "WARN":
            return "WARNING"
        return "INFO"

    @classmethod
    def from_env(cls) -> AutoTestIdConfig:
        filename = (os.environ.get("MCP_AUTOTESTID_PROMPT_FILE") or "").strip() or DEFAULT_PROMPT_FILENAME
        return cls(
            use_template=parse_flag(os.environ.get("MCP_AUTOTESTID_TEMPLATE"), default=True),
            prompt_paths=split_paths(os.environ.get("MCP_AUTOTESTID_PROMPT_PATHS")),
            prompt_filename=filename,
            log_level=cls.normalize_log_level(os.environ.get("MCP_LOG_LEVEL")),
        )

    def template_loader(self) -> PromptTemplate | None:
        """Fresh lookup per call (cwd may change between calls); None when disabled."""
        if not self.use_template:
            return None
        return PromptTemplate.from_paths(self.prompt_paths, filename=self.prompt_filename)
