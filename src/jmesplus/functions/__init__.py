"""Built-in extension functions.

``BUILTIN_FUNCTIONS`` is the ordered tuple of every ``FunctionSpec``
shipped with jmesplus; ``jmesplus.registry.default_registry`` wraps it.
"""
from __future__ import annotations

from jmesplus.functions import (
    arithmetic,
    encoding,
    matching,
    paths,
    regexp,
    strings,
    timing,
    versions,
)
from jmesplus.registry.spec import FunctionSpec

BUILTIN_FUNCTIONS: tuple[FunctionSpec, ...] = (
    *strings.FUNCTIONS,
    *regexp.FUNCTIONS,
    *matching.FUNCTIONS,
    *arithmetic.FUNCTIONS,
    *encoding.FUNCTIONS,
    *timing.FUNCTIONS,
    *paths.FUNCTIONS,
    *versions.FUNCTIONS,
)

__all__ = ["BUILTIN_FUNCTIONS"]
