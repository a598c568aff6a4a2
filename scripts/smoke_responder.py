#!/usr/bin/env python3
"""Smoke test for a running demo server (python -m jsonresponder).

Requests each demo route and compares status codes and envelope keys.
Prints one line per route and exits non-zero if any check fails.
"""
from __future__ import annotations

import argparse
import sys

import httpx

DEFAULT_BASE_URL = "http://127.0.0.1:8080"

# (method, path, expected status, expected top-level keys)
CHECKS: list[tuple[str, str, int, set[str]]] = [
    ("GET", "/health", 200, {"data"}),
    ("GET", "/demo/data", 200, {"data"}),
    ("GET", "/demo/items", 200, {"data"}),
    ("GET", "/demo/empty", 204, set()),
    ("GET", "/demo/error", 500, {"errors"}),
    ("GET", "/demo/errors", 500, {"errors"}),
    ("GET", "/demo/aggregate", 500, {"errors"}),
    ("POST", "/demo/accepted", 202, {"data"}),
    ("POST", "/demo/conflict", 409, {"errors"}),
]


def run_smoke_check(base_url: str) -> int:
    """Perform the smoke checks and return the desired exit code."""

    failures = 0
    with httpx.Client(base_url=base_url.rstrip("/"), timeout=5) as client:
        for method, path, expected_status, expected_keys in CHECKS:
            try:
                response = client.request(method, path)
            except httpx.RequestError as exc:
                print(f"ERROR: Unable to reach {base_url}{path}: {exc}", file=sys.stderr)
                return 1

            keys = set(response.json()) if response.content else set()
            if response.status_code != expected_status or keys != expected_keys:
                failures += 1
                snippet = response.text[:200].replace("\n", " ")
                print(
                    f"FAIL: {method} {path} -> HTTP {response.status_code} {snippet}",
                    file=sys.stderr,
                )
            else:
                print(f"OK:   {method} {path} -> HTTP {response.status_code}")

    return 1 if failures else 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Check that the demo server renders every envelope shape."
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Base URL for the server (default: {DEFAULT_BASE_URL})",
    )
    args = parser.parse_args()

    sys.exit(run_smoke_check(args.base_url))


if __name__ == "__main__":
    main()
