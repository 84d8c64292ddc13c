"""
Instructional template lookup.

The two-phase workflow instructions live in a markdown file that may sit in a
few places depending on how the server was started (source checkout, installed
package, custom working directory). Candidates are tried in order and the first
existing file wins. A missing file is not an error: callers fall back to the
built-in Phase-1 prompt.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

logger = logging.getLogger("mcp.autotestid.template")

DEFAULT_PROMPT_FILENAME = "add_test_id_prompt.md"
PROMPT_DIRNAME = "tech_prompts"

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


def default_candidates(
    base_dir: Path | None = None,
    cwd: Path | None = None,
    filename: str = DEFAULT_PROMPT_FILENAME,
) -> list[Path]:
    """Ordered candidate locations for the template file."""
    base = base_dir or _PACKAGE_DIR
    work = cwd or Path.cwd()
    repo_root = base.parent.parent
    return [
        base / PROMPT_DIRNAME / filename,
        base.parent / PROMPT_DIRNAME / filename,
        repo_root / PROMPT_DIRNAME / filename,
        work / PROMPT_DIRNAME / filename,
        work / "autotestid" / PROMPT_DIRNAME / filename,
        base / filename,
        work / filename,
    ]


class PromptTemplate:
    """First-match-wins lookup over an ordered list of candidate paths."""

    def __init__(self, candidates: Iterable[Path | str]) -> None:
        self.candidates: list[Path] = [Path(c).expanduser() for c in candidates]

    @classmethod
    def from_paths(cls, extra: Sequence[str] = (), filename: str = DEFAULT_PROMPT_FILENAME) -> PromptTemplate:
        """Configured extra paths are searched before the default locations."""
        return cls([*extra, *default_candidates(filename=filename)])

    def find(self) -> Path | None:
        for path in self.candidates:
            logger.debug("Checking path: %s", path)
            if path.is_file():
                logger.info("Found test ID prompt at: %s", path)
                return path
        return None

    def load(self) -> str:
        """Return the template content, or "" when no candidate exists or reading fails."""
        try:
            path = self.find()
            if path is None:
                logger.warning("Could not find test ID prompt file in any of the expected locations")
                return ""
            return path.read_text(encoding="utf-8")
        except OSError:
            logger.exception("Error searching for test ID prompt file")
            return ""

    __call__ = load


__all__ = ["DEFAULT_PROMPT_FILENAME", "PROMPT_DIRNAME", "PromptTemplate", "default_candidates"]
