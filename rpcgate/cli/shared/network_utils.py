"""Network helpers for CLI commands."""

from __future__ import annotations

import errno
import socket


def _address_family(host: str) -> socket.AddressFamily:
    return socket.AF_INET6 if ":" in host else socket.AF_INET


def is_port_in_use(host: str, port: int) -> bool:
    """True when ``host:port`` cannot be bound because something else holds it.

    Port 0 asks uvicorn for an ephemeral port and is never reported busy.
    """
    if port == 0:
        return False
    with socket.socket(_address_family(host), socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                return True
            raise
    return False
