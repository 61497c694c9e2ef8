"""HTTP API for rpcgate."""
