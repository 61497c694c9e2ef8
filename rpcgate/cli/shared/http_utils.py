"""HTTP and config helpers for CLI commands."""

from __future__ import annotations

import json
from typing import Any

import httpx

from rpcgate.config.schema import Config


def get_server_base_url(config: Config) -> str:
    """Build server base URL from config."""
    host = config.server.host
    if host in {"0.0.0.0", "::"}:
        host = "127.0.0.1"
    return f"http://{host}:{config.server.port}"


def get_rpc_url(config: Config) -> str:
    path = config.server.path if config.server.path.startswith("/") else f"/{config.server.path}"
    return get_server_base_url(config) + path


def build_rpc_request(method: str, params: Any = None, request_id: Any = 1) -> dict[str, Any]:
    """Build one JSON-RPC request object; ``params`` omitted when None."""
    req: dict[str, Any] = {"id": request_id, "jsonrpc": "2.0", "method": method}
    if params is not None:
        req["params"] = params
    return req


def parse_params(raw: str | None) -> Any:
    """Parse a JSON params argument; empty means no params."""
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"params must be valid JSON: {exc}") from exc


def rpc_post(url: str, payload: Any, timeout: float = 10.0) -> tuple[int, Any]:
    """POST a JSON-RPC payload and return (status_code, decoded body)."""
    with httpx.Client(timeout=timeout) as client:
        resp = client.post(url, json=payload, headers={"Accept": "application/json"})
    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    return resp.status_code, body


def parse_request_id(raw: str) -> Any:
    """JSON scalar when it parses as one, otherwise the raw string."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    if isinstance(value, (dict, list)):
        return raw
    return value
