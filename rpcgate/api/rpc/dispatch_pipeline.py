"""Concurrent per-request dispatch: one task per envelope, one slot per task."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any

from fastapi import Request
from loguru import logger

from rpcgate.api.rpc.error_boundary import action_error, invalid_params_error, unknown_method_error
from rpcgate.api.rpc.models import RequestEnvelope, ResponseEnvelope
from rpcgate.api.rpc.registry import FunctionMethod, MethodRegistry, RpcMethod
from rpcgate.utils.exceptions import JsonRpcError, error_text


def _is_async_method(method: RpcMethod) -> bool:
    if isinstance(method, FunctionMethod):
        return inspect.iscoroutinefunction(method.func)
    return inspect.iscoroutinefunction(method.action)


async def run_action(method: RpcMethod, request: Request, params: Any) -> Any:
    """Invoke an action; sync actions run in a worker thread."""
    if _is_async_method(method):
        return await method.action(request, params)
    outcome = await asyncio.to_thread(method.action, request, params)
    return await outcome if inspect.isawaitable(outcome) else outcome


async def dispatch_request(
    envelope: RequestEnvelope,
    slot: ResponseEnvelope,
    *,
    registry: MethodRegistry,
    http_request: Request,
) -> None:
    """Resolve, decode, validate and run one request, writing only ``slot``."""
    name = envelope.method
    method = registry.lookup(name)
    if method is None:
        logger.warning("RPC unknown method {}", name)
        slot.fail(unknown_method_error(name))
        return

    try:
        params = method.new_params(envelope.params)
    except Exception as exc:
        logger.warning("RPC method {} params decode failed: {}", name, error_text(exc))
        slot.fail(invalid_params_error(exc))
        return

    try:
        params.validate_params()
    except Exception as exc:
        logger.warning("RPC method {} params rejected: {}", name, error_text(exc))
        slot.fail(invalid_params_error(exc))
        return

    try:
        result = await run_action(method, http_request, params)
    except JsonRpcError as exc:
        logger.warning("RPC method {} failed with {}: {}", name, exc.code, exc.message)
        slot.fail(action_error(exc))
        return
    except Exception as exc:
        logger.exception("RPC method {} failed: {}", name, error_text(exc))
        slot.fail(action_error(exc))
        return

    slot.succeed(result)


async def dispatch_batch(
    requests: list[RequestEnvelope],
    *,
    registry: MethodRegistry,
    http_request: Request,
) -> list[ResponseEnvelope]:
    """Run every request concurrently and return responses in input order.

    Slots are allocated before any task starts; the call returns only after
    every task has finished.
    """
    responses = [ResponseEnvelope.for_request(envelope) for envelope in requests]
    tasks = [
        asyncio.create_task(
            dispatch_request(envelope, slot, registry=registry, http_request=http_request)
        )
        for envelope, slot in zip(requests, responses)
    ]
    if tasks:
        await asyncio.gather(*tasks)
    return responses
