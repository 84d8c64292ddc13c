#!/usr/bin/env python3
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

print(
    f"[mcp] autotestid | template={os.environ.get('MCP_AUTOTESTID_TEMPLATE', '1')} | "
    f"prompt_paths={os.environ.get('MCP_AUTOTESTID_PROMPT_PATHS', 'default')} | "
    f"log_level={os.environ.get('MCP_LOG_LEVEL', 'INFO')}",
    file=sys.stderr,
)

from mcp_servers.autotestid.main import main  # noqa: E402

if __name__ == "__main__":
    main()
