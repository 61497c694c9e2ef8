"""Request/response envelope models for JSON-RPC 2.0."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from rpcgate.utils.exceptions import JsonRpcError

JSONRPC_VERSION = "2.0"

JsonScalar = str | int | float | bool | None


class RequestEnvelope(BaseModel):
    """One inbound call. ``params`` stays undecoded until its method claims it."""

    model_config = ConfigDict(extra="ignore")

    id: JsonScalar = None
    jsonrpc: Any = JSONRPC_VERSION  # not validated
    method: str = ""
    params: Any = None

    @model_validator(mode="before")
    @classmethod
    def _degrade_malformed(cls, data: Any) -> Any:
        """A non-string method or non-scalar id empties the method name.

        The element then fails alone as method-not-found instead of failing
        the whole body. A non-scalar id is answered as null.
        """
        if not isinstance(data, dict):
            return data
        bad_id = isinstance(data.get("id"), (dict, list))
        bad_method = "method" in data and not isinstance(data["method"], str)
        if not (bad_id or bad_method):
            return data
        data = {**data, "method": ""}
        if bad_id:
            data["id"] = None
        return data

    @property
    def has_id(self) -> bool:
        """True when the caller sent an ``id`` key, even ``null``."""
        return "id" in self.model_fields_set


@dataclass(slots=True)
class ResponseEnvelope:
    """Pre-allocated outcome slot for one request; written by exactly one task."""

    id: JsonScalar = None
    has_id: bool = False
    result: Any = None
    error: JsonRpcError | None = None
    resolved: bool = False

    @classmethod
    def for_request(cls, request: RequestEnvelope) -> "ResponseEnvelope":
        return cls(id=request.id, has_id=request.has_id)

    def succeed(self, result: Any) -> None:
        self.result = result
        self.error = None
        self.resolved = True

    def fail(self, error: JsonRpcError) -> None:
        self.result = None
        self.error = error
        self.resolved = True

    def to_payload(self) -> dict[str, Any]:
        """Wire shape with keys ordered ``id, jsonrpc, result|error``."""
        payload: dict[str, Any] = {}
        if self.has_id:
            payload["id"] = self.id
        payload["jsonrpc"] = JSONRPC_VERSION
        if self.error is not None:
            payload["error"] = self.error.to_error_payload()
        elif self.resolved:
            payload["result"] = self.result
        return payload


def error_envelope(error: JsonRpcError) -> dict[str, Any]:
    """Top-level envelope for transport failures (no id)."""
    return {"jsonrpc": JSONRPC_VERSION, "error": error.to_error_payload()}
