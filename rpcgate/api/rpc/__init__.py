"""JSON-RPC 2.0 dispatcher."""

from rpcgate.api.rpc.models import RequestEnvelope, ResponseEnvelope
from rpcgate.api.rpc.registry import EmptyParams, FunctionMethod, MethodParams, MethodRegistry, RpcMethod
from rpcgate.api.rpc.service import RpcService

__all__ = [
    "RequestEnvelope",
    "ResponseEnvelope",
    "EmptyParams",
    "FunctionMethod",
    "MethodParams",
    "MethodRegistry",
    "RpcMethod",
    "RpcService",
]
