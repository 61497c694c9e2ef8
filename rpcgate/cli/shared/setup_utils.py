"""Resolve ``module:attr`` setup hooks that register methods on a service."""

from __future__ import annotations

import importlib
from typing import Any, Callable

from rpcgate.api.rpc.service import RpcService


def load_setup_hook(target: str) -> Callable[[RpcService], None]:
    """Import ``module:attr``.

    ``attr`` may be a function taking the service, or an object with a
    ``register(service)`` method.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"setup hook must look like 'module:attr', got {target!r}")
    module = importlib.import_module(module_name)
    try:
        hook: Any = getattr(module, attr)
    except AttributeError as exc:
        raise ValueError(f"{module_name} has no attribute {attr!r}") from exc
    register = getattr(hook, "register", None)
    if callable(register):
        return register
    if callable(hook):
        return hook
    raise ValueError(f"setup hook {target!r} is not callable")
