"""Method registry: JSON-RPC method name -> method descriptor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from fastapi import Request
from loguru import logger
from pydantic import BaseModel, ConfigDict

from rpcgate.utils.exceptions import DuplicateMethodError


class MethodParams(BaseModel):
    """Base for method parameter shapes."""

    model_config = ConfigDict(extra="ignore")

    def validate_params(self) -> None:
        """Cross-field checks run after decoding. Raise ValueError to reject."""


class EmptyParams(MethodParams):
    pass


class RpcMethod(ABC):
    """Descriptor bound under a method name: a parameter shape plus an action.

    Usage:
        class Add(RpcMethod):
            params_model = AddParams

            async def action(self, request, params):
                return params.a + params.b
    """

    params_model: type[MethodParams] = EmptyParams

    def new_params(self, raw: Any) -> MethodParams:
        """Decode ``raw`` into a fresh params instance (absent params decode as ``{}``)."""
        return self.params_model.model_validate({} if raw is None else raw)

    @abstractmethod
    def action(self, request: Request, params: Any) -> Any | Awaitable[Any]:
        """Run the method. May be sync or async; raise to fail."""


class FunctionMethod(RpcMethod):
    """Adapt a plain (sync or async) function into an RpcMethod."""

    def __init__(
        self,
        func: Callable[[Request, Any], Any],
        params_model: type[MethodParams] = EmptyParams,
    ):
        self.func = func
        self.params_model = params_model

    def action(self, request: Request, params: Any) -> Any | Awaitable[Any]:
        return self.func(request, params)

    def __repr__(self) -> str:
        return f"FunctionMethod({getattr(self.func, '__name__', self.func)!r})"


class MethodRegistry:
    """Populated during setup, read-only while serving."""

    def __init__(self):
        self._methods: dict[str, RpcMethod] = {}

    def register(self, name: str, method: RpcMethod) -> None:
        if name in self._methods:
            raise DuplicateMethodError(name)
        self._methods[name] = method
        logger.debug("Registered RPC method {}", name)

    def lookup(self, name: str) -> RpcMethod | None:
        """Return the bound descriptor, or None when the name is unknown."""
        return self._methods.get(name)

    def names(self) -> list[str]:
        return sorted(self._methods)

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __len__(self) -> int:
        return len(self._methods)
