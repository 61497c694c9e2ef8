"""Pytest hooks and fixtures."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from rpcgate.api.rpc import MethodParams, RpcMethod, RpcService
from rpcgate.api.server import create_app


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line("markers", "slow: concurrency tests that sleep")


class FakeParams(MethodParams):
    foo: str = ""
    bar: int = 0


class FakeMethod(RpcMethod):
    params_model = FakeParams

    def __init__(self, ident: str = "foo"):
        self.ident = ident

    def action(self, request: Any, params: FakeParams) -> dict[str, Any]:
        return {params.foo: self.ident, "bar": f"I LIKE {params.bar} BARS"}


@pytest.fixture
def service() -> RpcService:
    """Service with two methods `FooBar` and `BarFoo`."""
    svc = RpcService()
    svc.register("FooBar", FakeMethod("foo"))
    svc.register("BarFoo", FakeMethod("foo"))
    return svc


@pytest.fixture
def client(service: RpcService) -> TestClient:
    return TestClient(create_app(service))
