"""Function registry subsystem.

``FunctionSpec`` and ``ArgumentSpec`` declare functions;
``FunctionRegistry`` holds them; ``default_registry`` returns the
built-in set.
"""
from __future__ import annotations

from jmesplus.registry.registry import (
    ENTRYPOINT_GROUP,
    DuplicateFunctionError,
    FunctionNotFoundError,
    FunctionRegistry,
    default_registry,
)
from jmesplus.registry.spec import ArgumentSpec, FunctionSpec, Handler

__all__ = [
    "ArgumentSpec",
    "FunctionSpec",
    "Handler",
    "FunctionRegistry",
    "FunctionNotFoundError",
    "DuplicateFunctionError",
    "ENTRYPOINT_GROUP",
    "default_registry",
]
