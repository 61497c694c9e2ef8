"""Utility functions for rpcgate."""

from rpcgate.utils.exceptions import (
    RpcGateError,
    JsonRpcError,
    ParseError,
    MethodNotFoundError,
    InvalidParamsError,
    InternalError,
    DuplicateMethodError,
    MethodError,
    ErrorCategory,
    error_text,
)

__all__ = [
    "RpcGateError",
    "JsonRpcError",
    "ParseError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalError",
    "DuplicateMethodError",
    "MethodError",
    "ErrorCategory",
    "error_text",
]
