#!/usr/bin/env python3
"""Example: Quickstart — jmesplus

Minimal working example: query a Kubernetes-style document with the
extension functions, reuse a compiled expression, and register a custom
function.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install jmesplus
"""
from __future__ import annotations

from typing import Any

import jmesplus
from jmesplus import ArgumentSpec, FunctionSpec, ValueKind

POD: dict[str, Any] = {
    "metadata": {
        "name": "web-7f9c",
        "labels": {"app": "web", "tier": "frontend"},
        "creationTimestamp": "2024-03-01T10:00:00Z",
    },
    "spec": {
        "containers": [
            {"name": "nginx", "image": "nginx:1.25.3", "timeout": "90s"},
            {"name": "sidecar", "image": "envoy:1.29.0", "timeout": "2m"},
        ],
    },
}


def _reverse(arguments: list[Any]) -> str:
    return arguments[0][::-1]


def main() -> None:
    print(f"jmesplus version: {jmesplus.__version__}")

    # Step 1: String and matching functions
    print("Upper name:", jmesplus.search("to_upper(metadata.name)", POD))
    print("Is web:", jmesplus.search("label_match(`{\"app\": \"web\"}`, metadata.labels)", POD))
    print("Images:", jmesplus.search("spec.containers[].split(image, ':')", POD))

    # Step 2: Durations and time
    total = jmesplus.search("add(spec.containers[0].timeout, spec.containers[1].timeout)", POD)
    print(f"Combined timeout: {total}")
    age = jmesplus.search(
        "time_since('', metadata.creationTimestamp, '2024-03-02T12:00:00Z')", POD
    )
    print(f"Pod age at noon next day: {age}")

    # Step 3: Compile once, evaluate many times
    parsed = jmesplus.compile("semver_compare(@, '>=1.0.0 <2.0.0')")
    options = jmesplus.build_options()
    for version in ("0.9.0", "1.4.2", "2.0.0"):
        print(f"  {version} in range: {parsed.search(version, options=options)}")

    # Step 4: Extend the registry with a custom function
    registry = jmesplus.default_registry().merged(
        [FunctionSpec("reverse_text", (ArgumentSpec.of(ValueKind.STRING),), _reverse, "Reverse a string")]
    )
    print("Reversed:", jmesplus.search("reverse_text(metadata.name)", POD, registry=registry))

    # Step 5: Failures carry the function name
    try:
        jmesplus.search("divide(`1`, `0`)", POD)
    except jmesplus.FunctionError as exc:
        print(f"Error: {exc}")


if __name__ == "__main__":
    main()
