"""rpcgate - JSON-RPC 2.0 dispatcher over HTTP."""

__version__ = "0.1.0"
__logo__ = "⇄"
