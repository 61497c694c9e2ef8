"""Common RPC error-boundary helpers for dispatch."""

from __future__ import annotations

from pydantic import ValidationError

from rpcgate.utils.exceptions import (
    INTERNAL_ERROR,
    InternalError,
    InvalidParamsError,
    JsonRpcError,
    MethodError,
    MethodNotFoundError,
    error_text,
)


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into one line: ``loc: msg; loc: msg``."""
    parts: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = str(err.get("msg", ""))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or str(exc)


def unknown_method_error(method: str) -> JsonRpcError:
    """Build standardized unknown-method error."""
    return MethodNotFoundError(method)


def invalid_params_error(exc: Exception) -> JsonRpcError:
    """Map a params decode or ``validate_params`` failure to INVALID_PARAMS."""
    if isinstance(exc, ValidationError):
        return InvalidParamsError(format_validation_error(exc))
    return InvalidParamsError(error_text(exc))


def action_error(exc: Exception) -> JsonRpcError:
    """Map any action failure to INTERNAL_ERROR, keeping MethodError data."""
    if isinstance(exc, MethodError):
        return exc
    return InternalError(error_text(exc))


def classify_http_status(error: JsonRpcError) -> int:
    """HTTP status for a transport-level failure."""
    if error.rpc_code == INTERNAL_ERROR:
        return 500
    return 400
