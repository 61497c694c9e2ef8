"""Example method set for rpcgate.

Serve it with:
  PYTHONPATH=examples/hello_methods rpcgate serve --setup methods:plugin
"""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import Request
from pydantic import ConfigDict

from rpcgate.api.rpc import MethodParams, RpcMethod, RpcService
from rpcgate.utils.exceptions import MethodError


class FooBarParams(MethodParams):
    foo: str
    bar: int

    def validate_params(self) -> None:
        if self.bar < 0:
            raise ValueError("bar must not be negative")


class FooBar(RpcMethod):
    params_model = FooBarParams

    def action(self, request: Request, params: FooBarParams) -> dict[str, Any]:
        return {params.foo: "foo", "bar": f"I LIKE {params.bar} BARS"}


class EchoParams(MethodParams):
    model_config = ConfigDict(extra="allow")


class SleepParams(MethodParams):
    seconds: float = 0.1


class HelloMethodsPlugin:
    def register(self, service: RpcService) -> None:
        service.register("FooBar", FooBar())

        @service.method("hello.echo", EchoParams)
        def _echo(request: Request, params: EchoParams) -> dict[str, Any]:
            return {"echo": params.model_dump()}

        @service.method("hello.sleep", SleepParams)
        async def _sleep(request: Request, params: SleepParams) -> dict[str, Any]:
            await asyncio.sleep(params.seconds)
            return {"slept": params.seconds}

        @service.method("hello.fail")
        def _fail(request: Request, params: MethodParams) -> None:
            raise MethodError("this method always fails", data="hello.fail")


plugin = HelloMethodsPlugin()
