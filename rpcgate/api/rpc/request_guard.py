"""RPC request guard helpers: transport checks and body shape detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from rpcgate.api.rpc.error_boundary import format_validation_error
from rpcgate.api.rpc.models import RequestEnvelope
from rpcgate.utils.exceptions import ParseError

_BATCH_ADAPTER = TypeAdapter(list[RequestEnvelope])


@dataclass(slots=True)
class ParsedRpcBody:
    """Request envelopes in input order plus the original body shape."""

    requests: list[RequestEnvelope]
    singular: bool


def check_http_method(verb: str) -> None:
    """Only POST carries JSON-RPC calls."""
    if verb.upper() != "POST":
        raise ParseError("invalid HTTP method")


def check_content_type(content_type: str | None, *, accept: Iterable[str], enforce: bool) -> None:
    """Apply the accepted content-type list when enforcement is enabled."""
    if not enforce:
        return
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    allowed = {item.strip().lower() for item in accept}
    if media_type not in allowed:
        raise ParseError(f"unsupported content type: {media_type or '(none)'}")


def parse_rpc_body(body: bytes) -> ParsedRpcBody:
    """Decode a batch, falling back to a single envelope.

    When both attempts fail the batch attempt's message is reported.
    """
    try:
        return ParsedRpcBody(requests=_BATCH_ADAPTER.validate_json(body), singular=False)
    except ValidationError as exc:
        batch_error = exc

    try:
        single = RequestEnvelope.model_validate_json(body)
    except ValidationError:
        raise ParseError(format_validation_error(batch_error)) from batch_error
    return ParsedRpcBody(requests=[single], singular=True)
