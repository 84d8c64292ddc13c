#!/usr/bin/env python3
"""Regenerate contracts/tools.{json,md} from the live contract.

Usage:
  generate_contracts.py           rewrite both files
  generate_contracts.py --check   exit 1 (without writing) when either file is stale
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from mcp_servers.autotestid.server.contract import contract_snapshot  # noqa: E402
from mcp_servers.autotestid.server.contract_docs import render_tools_markdown  # noqa: E402

CONTRACTS_DIR = ROOT / "contracts"


def rendered_contracts() -> dict[Path, str]:
    snapshot = contract_snapshot()
    return {
        CONTRACTS_DIR / "tools.json": json.dumps(snapshot, ensure_ascii=False, indent=2) + "\n",
        CONTRACTS_DIR / "tools.md": render_tools_markdown(snapshot),
    }


def stale_files(rendered: dict[Path, str]) -> list[Path]:
    return [
        path
        for path, text in rendered.items()
        if not path.is_file() or path.read_text(encoding="utf-8") != text
    ]


def main(argv: list[str]) -> int:
    rendered = rendered_contracts()

    if "--check" in argv:
        stale = stale_files(rendered)
        for path in stale:
            print(f"Stale: {path.relative_to(ROOT)}", file=sys.stderr)
        return 1 if stale else 0

    CONTRACTS_DIR.mkdir(parents=True, exist_ok=True)
    for path, text in rendered.items():
        path.write_text(text, encoding="utf-8")
        print(f"Wrote: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
