"""
MCP server for the AutoTestID locator workflow.

This module provides the main entry point and protocol handling: one JSON-RPC
message per line on stdin, one response per line on stdout. Logs go to stderr.
Tool dispatch is handled via registry pattern in server/registry.py.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

from .config import AutoTestIdConfig
from .server.contract import (
    DEFAULT_PROTOCOL_VERSION,
    LATEST_PROTOCOL_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
    initialize_result,
    select_protocol,
    tools_list,
)
from .server.errors import INTERNAL_ERROR, INVALID_REQUEST, PARSE_ERROR, JsonRpcError
from .server.redaction import redact_jsonrpc_for_dump, redact_jsonrpc_for_log, redact_tool_arguments
from .server.registry import create_default_registry

logging.basicConfig(
    level=AutoTestIdConfig.normalize_log_level(os.environ.get("MCP_LOG_LEVEL")),
    format="%(asctime)s %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("mcp.autotestid")

__all__ = [
    "SUPPORTED_PROTOCOL_VERSIONS",
    "LATEST_PROTOCOL_VERSION",
    "DEFAULT_PROTOCOL_VERSION",
    "McpServer",
    "main",
]


def _dump_frame(direction: bytes, payload: Any, raw: bytes) -> None:
    dump_path = os.environ.get("MCP_DUMP_FRAMES")
    if not dump_path:
        return
    if dump_dir := os.path.dirname(dump_path):
        os.makedirs(dump_dir, exist_ok=True)
    with open(dump_path, "ab") as fp:
        fp.write(direction)
        if os.environ.get("MCP_DUMP_FRAMES_RAW") == "1" or payload is None:
            fp.write(raw.rstrip(b"\n") + b"\n")
        else:
            safe = redact_jsonrpc_for_dump(payload)
            fp.write((json.dumps(safe, ensure_ascii=False) + "\n").encode())


def _write_message(payload: dict[str, Any]) -> None:
    """Write JSON-RPC message to stdout."""
    data = json.dumps(payload, ensure_ascii=False)
    line = (data + "\n").encode()
    _dump_frame(b"--out--\n", payload, line)
    sys.stdout.buffer.write(line)
    sys.stdout.buffer.flush()


def _read_line() -> bytes | None:
    """Read one raw line from stdin; None on EOF."""
    line = sys.stdin.buffer.readline()
    if not line:
        return None
    return line


def _error_response(request_id: Any, error: JsonRpcError) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": error.to_dict()}


class McpServer:
    """MCP Server with registry-based tool dispatch."""

    def __init__(self, config: AutoTestIdConfig | None = None) -> None:
        self.config = config or AutoTestIdConfig.from_env()
        self.registry = create_default_registry()

    def handle_initialize(self, request_id: Any, params: dict[str, Any] | None = None) -> None:
        """Handle initialize request."""
        requested = (params or {}).get("protocolVersion") if isinstance(params, dict) else None
        protocol = select_protocol(requested)
        _write_message(
            {
                "jsonrpc": "2.0",
                "id": request_id,
                "result": initialize_result(protocol),
            }
        )

    def handle_list_tools(self, request_id: Any) -> None:
        """Handle tools/list request."""
        _write_message(
            {
                "jsonrpc": "2.0",
                "id": request_id,
                "result": {"tools": tools_list()},
            }
        )

    def _log_call(self, name: str, arguments: Any) -> None:
        """Log tool call with truncated, redacted arguments."""
        safe_args = redact_tool_arguments(name, arguments)
        logger.info("tool=%s args=%s", name, safe_args)

    def handle_call_tool(self, request_id: Any, name: str, arguments: Any) -> None:
        """Handle tool call via registry dispatch; faults become JSON-RPC errors."""
        self._log_call(name, arguments)

        if not isinstance(arguments, dict):
            raise JsonRpcError.invalid_params("arguments must be an object")

        try:
            result = self.registry.dispatch(name, self.config, arguments)
        except JsonRpcError:
            raise
        except Exception as exc:
            logger.exception("tool_call_failed")
            raise JsonRpcError(INTERNAL_ERROR, f"Error processing AutoTestID workflow: {exc}") from exc

        _write_message(
            {
                "jsonrpc": "2.0",
                "id": request_id,
                "result": {"content": result.to_content_list()},
            }
        )

    def _route(self, message: dict[str, Any]) -> None:
        method = message.get("method")
        request_id = message.get("id")
        params = message.get("params") or {}

        if method == "initialize":
            self.handle_initialize(request_id, params)
        elif isinstance(method, str) and method.startswith("notifications/"):
            return
        elif method == "tools/list":
            self.handle_list_tools(request_id)
        elif method == "tools/call":
            if not isinstance(params, dict):
                raise JsonRpcError.invalid_params("params must be an object")
            name = params.get("name")
            arguments = params.get("arguments")
            self.handle_call_tool(request_id, name or "", {} if arguments is None else arguments)
        elif method == "ping":
            _write_message({"jsonrpc": "2.0", "id": request_id, "result": {}})
        elif "id" in message:
            raise JsonRpcError.method_not_found(method)

    def dispatch(self, message: Any) -> None:
        """Dispatch incoming JSON-RPC message to appropriate handler.

        Errors are answered (requests only, never notifications) and never
        propagate: one failed request must not stop the serving loop.
        """
        if not isinstance(message, dict):
            _write_message(_error_response(None, JsonRpcError(INVALID_REQUEST, "Request must be a JSON object")))
            return

        request_id = message.get("id")
        try:
            self._route(message)
        except JsonRpcError as err:
            logger.info("jsonrpc_error code=%d data=%s", err.code, err.data)
            if "id" in message:
                _write_message(_error_response(request_id, err))
        except Exception as exc:
            logger.exception("Error processing message")
            if "id" in message:
                _write_message(_error_response(request_id, JsonRpcError(INTERNAL_ERROR, str(exc))))

    def handle_line(self, line: bytes) -> None:
        """Decode one framed line and dispatch it; malformed JSON becomes a parse error."""
        raw = line.strip()
        if not raw:
            return
        try:
            message = json.loads(raw.decode())
        except (UnicodeDecodeError, ValueError) as exc:
            logger.info("parse_error %s", exc)
            _dump_frame(b"--in--\n", None, raw)
            _write_message(_error_response(None, JsonRpcError(PARSE_ERROR, str(exc))))
            return

        if os.environ.get("MCP_TRACE"):
            logger.info("recv %s", redact_jsonrpc_for_log(message))
        _dump_frame(b"--in--\n", message, raw)
        self.dispatch(message)


def main() -> None:
    """Main entry point for MCP server."""
    server = McpServer()
    logger.info("autotestid_mcp_started tools=%s", server.registry.tool_names)
    while True:
        line = _read_line()
        if line is None:
            break
        server.handle_line(line)


if __name__ == "__main__":
    main()
