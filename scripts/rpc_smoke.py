#!/usr/bin/env python3
"""JSON-RPC smoke checks against a running rpcgate server.

Usage:
  PYTHONPATH=examples/hello_methods rpcgate serve --setup methods:plugin
  python scripts/rpc_smoke.py --url http://127.0.0.1:18800/rpc
"""

from __future__ import annotations

import argparse

import httpx


def _check(label: str, ok: bool, detail: object) -> bool:
    print(f"[{'ok' if ok else 'FAIL'}] {label}" + ("" if ok else f": {detail}"))
    return ok


def run(url: str) -> bool:
    results: list[bool] = []
    with httpx.Client(timeout=10.0) as client:
        resp = client.post(
            url,
            json={"id": 1, "jsonrpc": "2.0", "method": "FooBar", "params": {"foo": "X", "bar": 10}},
        )
        results.append(
            _check(
                "single request",
                resp.status_code == 200
                and resp.json() == {"id": 1, "jsonrpc": "2.0", "result": {"X": "foo", "bar": "I LIKE 10 BARS"}},
                resp.text,
            )
        )

        resp = client.post(url, content=b"ASDKLASDJLAKSJDLKASJADS", headers={"Content-Type": "application/json"})
        results.append(
            _check("unparsable body", resp.status_code == 400 and resp.json()["error"]["code"] == -32700, resp.text)
        )

        resp = client.get(url)
        results.append(
            _check(
                "GET rejected",
                resp.status_code == 400
                and resp.json() == {"jsonrpc": "2.0", "error": {"code": -32700, "message": "invalid HTTP method"}},
                resp.text,
            )
        )

        resp = client.post(
            url,
            json=[
                {"id": "a", "jsonrpc": "2.0", "method": "nope", "params": {}},
                {"id": "b", "jsonrpc": "2.0", "method": "FooBar", "params": {"foo": "Y", "bar": 2}},
            ],
        )
        body = resp.json()
        results.append(
            _check(
                "batch with unknown method",
                resp.status_code == 200
                and [item["id"] for item in body] == ["a", "b"]
                and body[0]["error"]["code"] == -32601
                and body[1]["result"] == {"Y": "foo", "bar": "I LIKE 2 BARS"},
                resp.text,
            )
        )
    return all(results)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--url", default="http://127.0.0.1:18800/rpc")
    args = parser.parse_args()
    raise SystemExit(0 if run(args.url) else 1)


if __name__ == "__main__":
    main()
