"""JSON-RPC error codes and the exception handlers raise to produce them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

ERROR_MESSAGES: dict[int, str] = {
    PARSE_ERROR: "Parse error",
    INVALID_REQUEST: "Invalid Request",
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid params",
    INTERNAL_ERROR: "Internal error",
}


@dataclass
class JsonRpcError(Exception):
    """Structured protocol error; ``data`` carries the diagnostic detail."""

    code: int
    data: str | None = None
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "Server error")

    def __str__(self) -> str:
        return f"{self.message} ({self.code}): {self.data}" if self.data else f"{self.message} ({self.code})"

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error

    @classmethod
    def invalid_params(cls, detail: str) -> JsonRpcError:
        return cls(INVALID_PARAMS, detail)

    @classmethod
    def method_not_found(cls, method: Any) -> JsonRpcError:
        return cls(METHOD_NOT_FOUND, f"Unknown method: {method}")


__all__ = [
    "ERROR_MESSAGES",
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "JsonRpcError",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
]
