"""
Exception hierarchy and error helpers for rpcgate.

Provides:
- JSON-RPC 2.0 error codes
- Custom exception classes carrying those codes
- Error categorization (transport, per-request, registration)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

ERROR_MEANINGS: dict[int, str] = {
    PARSE_ERROR: "Parse error",
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid params",
    INTERNAL_ERROR: "Internal error",
}


class ErrorCategory(Enum):
    """Where a failure applies."""
    TRANSPORT = "transport"
    REQUEST = "request"
    REGISTRATION = "registration"


class RpcGateError(Exception):
    """Base exception for all rpcgate errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.REQUEST,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class JsonRpcError(RpcGateError):
    """Error that maps onto a JSON-RPC error object."""

    rpc_code: int = INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.REQUEST,
        data: str | None = None,
    ):
        super().__init__(
            message,
            code=ERROR_MEANINGS[self.rpc_code].upper().replace(" ", "_"),
            category=category,
            details={"rpc_code": self.rpc_code},
        )
        self.data = data

    def to_error_payload(self) -> dict[str, Any]:
        """Render the JSON-RPC error object; ``data`` only when present."""
        payload: dict[str, Any] = {"code": self.rpc_code, "message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class ParseError(JsonRpcError):
    """Malformed body, wrong HTTP verb or rejected content type."""

    rpc_code = PARSE_ERROR

    def __init__(self, message: str):
        super().__init__(message, category=ErrorCategory.TRANSPORT)


class MethodNotFoundError(JsonRpcError):
    rpc_code = METHOD_NOT_FOUND

    def __init__(self, method: str):
        super().__init__(f"method name `{method}` does not exist")
        self.method = method


class InvalidParamsError(JsonRpcError):
    rpc_code = INVALID_PARAMS


class InternalError(JsonRpcError):
    rpc_code = INTERNAL_ERROR


class MethodError(InternalError):
    """Raised by method actions that want to attach auxiliary ``data``.

    Usage:
        raise MethodError("book is checked out", data="book-42")
    """

    def __init__(self, message: str, data: str | None = None):
        super().__init__(message, data=data)


class DuplicateMethodError(RpcGateError):
    """A method name was registered twice on the same registry."""

    def __init__(self, name: str):
        super().__init__(
            f"method name `{name}` has already been registered on this service",
            code="DUPLICATE_METHOD",
            category=ErrorCategory.REGISTRATION,
            details={"method": name},
        )
        self.name = name


def error_text(exc: BaseException) -> str:
    """Failure text passed through to callers verbatim."""
    if isinstance(exc, RpcGateError):
        return exc.message
    return str(exc)
