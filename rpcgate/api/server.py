"""FastAPI server exposing an RpcService over HTTP."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from loguru import logger

from rpcgate import __version__
from rpcgate.api.rpc.service import RpcService
from rpcgate.config.schema import Config


def create_app(service: RpcService, config: Config | None = None) -> FastAPI:
    """Create the FastAPI application serving ``service`` at ``config.server.path``."""
    config = config or Config()
    path = config.server.path

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting rpcgate API server path={} methods={}",
            path,
            service.registry.names(),
        )
        yield
        logger.info("rpcgate API server stopped")

    app = FastAPI(
        title="rpcgate",
        description="JSON-RPC 2.0 dispatcher",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.rpc_service = service

    @app.get("/health")
    async def health(request: Request):
        rpc_service: RpcService = request.app.state.rpc_service
        return {"ok": True, "methods": len(rpc_service.registry)}

    app.include_router(service.router(path))
    return app


def run_server(app: FastAPI, host: str = "127.0.0.1", port: int = 18800, log_level: str = "info") -> None:
    """Run the API server."""
    uvicorn.run(
        app,
        host=host,
        port=port,
        timeout_keep_alive=30,
        timeout_graceful_shutdown=10,
        log_level=log_level,
    )
