"""Build the final HTTP body from ordered response envelopes."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from loguru import logger

from rpcgate.api.rpc.error_boundary import classify_http_status
from rpcgate.api.rpc.models import ResponseEnvelope, error_envelope
from rpcgate.utils.exceptions import ErrorCategory, InternalError, JsonRpcError


@dataclass(slots=True)
class AssembledResponse:
    status_code: int
    body: bytes


def encode_json(payload: Any) -> bytes:
    """Compact JSON; NaN/Infinity, unknown types and runaway nesting raise."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")


def transport_failure(error: JsonRpcError) -> AssembledResponse:
    """Single top-level error envelope with its non-200 status."""
    return AssembledResponse(status_code=classify_http_status(error), body=encode_json(error_envelope(error)))


def assemble_response(responses: list[ResponseEnvelope], *, singular: bool) -> AssembledResponse:
    """Bare object for a singular request, array otherwise (including empty)."""
    if singular and len(responses) == 1:
        payload: Any = responses[0].to_payload()
    else:
        payload = [response.to_payload() for response in responses]
    try:
        body = encode_json(payload)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.error("RPC response serialization failed: {}", exc)
        return transport_failure(InternalError(str(exc), category=ErrorCategory.TRANSPORT))
    return AssembledResponse(status_code=200, body=body)
