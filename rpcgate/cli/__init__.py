"""Command-line interface for rpcgate."""
