"""RpcService: owns the method registry and serves the JSON-RPC HTTP entry point."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from fastapi import APIRouter, Request, Response
from loguru import logger

from rpcgate.api.rpc.dispatch_pipeline import dispatch_batch
from rpcgate.api.rpc.registry import EmptyParams, FunctionMethod, MethodParams, MethodRegistry, RpcMethod
from rpcgate.api.rpc.request_guard import check_content_type, check_http_method, parse_rpc_body
from rpcgate.api.rpc.response_assembler import AssembledResponse, assemble_response, transport_failure
from rpcgate.config.schema import Config
from rpcgate.utils.exceptions import ParseError, error_text

DEFAULT_ACCEPT = ("application/json", "text/json")


class RpcService:
    """JSON-RPC 2.0 service. Register methods during setup, then serve."""

    def __init__(
        self,
        *,
        accept: Iterable[str] | None = None,
        enforce_content_type: bool = False,
    ):
        self.registry = MethodRegistry()
        self.accept: list[str] = list(accept) if accept is not None else list(DEFAULT_ACCEPT)
        self.enforce_content_type = enforce_content_type

    @classmethod
    def from_config(cls, config: Config) -> "RpcService":
        return cls(accept=config.rpc.accept, enforce_content_type=config.rpc.enforce_content_type)

    def register(self, name: str, method: RpcMethod) -> None:
        """Bind ``name``; raises DuplicateMethodError if already bound."""
        self.registry.register(name, method)

    def method(
        self,
        name: str,
        params_model: type[MethodParams] = EmptyParams,
    ) -> Callable[[Any], Any]:
        """Decorator to register a function or an RpcMethod subclass.

        Usage:
            @service.method("FooBar", FooBarParams)
            async def foo_bar(request, params):
                ...

            @service.method("BarFoo")
            class BarFoo(RpcMethod):
                ...
        """

        def decorator(target: Any) -> Any:
            if isinstance(target, type) and issubclass(target, RpcMethod):
                self.register(name, target())
            else:
                self.register(name, FunctionMethod(target, params_model))
            return target

        return decorator

    async def handle(self, request: Request) -> Response:
        """HTTP handler: transport checks, parse, dispatch, assemble."""
        try:
            check_http_method(request.method)
            check_content_type(
                request.headers.get("content-type"),
                accept=self.accept,
                enforce=self.enforce_content_type,
            )
            body = await self._read_body(request)
            parsed = parse_rpc_body(body)
        except ParseError as exc:
            logger.info("RPC transport failure method={} error={}", request.method, exc.message)
            return self._to_response(transport_failure(exc))

        responses = await dispatch_batch(parsed.requests, registry=self.registry, http_request=request)
        return self._to_response(assemble_response(responses, singular=parsed.singular))

    def router(self, path: str = "/rpc") -> APIRouter:
        """APIRouter with an unfiltered route on ``path``; ``handle`` rejects non-POST verbs."""
        router = APIRouter()
        router.add_route(path, self.handle, include_in_schema=False)
        return router

    @staticmethod
    async def _read_body(request: Request) -> bytes:
        try:
            return await request.body()
        except Exception as exc:
            raise ParseError(error_text(exc) or type(exc).__name__) from exc

    @staticmethod
    def _to_response(assembled: AssembledResponse) -> Response:
        return Response(
            content=assembled.body,
            status_code=assembled.status_code,
            media_type="application/json",
        )
