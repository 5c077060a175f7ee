"""Wiring the function registry into the ``jmespath`` evaluator.

``jmespath`` dispatches every function call through
``Functions.call_function``.  ``RegistryFunctions`` answers for the names
in its registry and defers everything else (the standard JMESPath
functions) to the stock implementation.

Usage
-----
::

    import jmespath
    from jmesplus.evaluator import build_options

    options = build_options()
    jmespath.search("to_upper(name)", {"name": "nginx"}, options=options)
    # 'NGINX'
"""
from __future__ import annotations

from typing import Any

import jmespath
from jmespath import exceptions, functions
from jmespath.parser import ParsedResult

from jmesplus.registry.registry import FunctionRegistry, default_registry


class RegistryFunctions(functions.Functions):
    """``jmespath`` function provider backed by a ``FunctionRegistry``.

    Parameters
    ----------
    registry:
        The functions to expose.  Defaults to ``default_registry()``.
    """

    def __init__(self, registry: FunctionRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()

    def call_function(self, function_name: str, resolved_args: list[Any]) -> Any:
        if function_name not in self.registry:
            return super().call_function(function_name, resolved_args)
        spec = self.registry.get(function_name)
        if len(resolved_args) != spec.arity:
            raise exceptions.ArityError(spec.arity, len(resolved_args), function_name)
        spec.check_arguments(resolved_args)
        return spec(resolved_args)


def build_options(registry: FunctionRegistry | None = None) -> jmespath.Options:
    """Return ``jmespath.Options`` exposing ``registry`` alongside the built-ins."""
    return jmespath.Options(custom_functions=RegistryFunctions(registry))


def search(expression: str, data: Any, registry: FunctionRegistry | None = None) -> Any:
    """Evaluate ``expression`` against ``data`` with the extension functions loaded."""
    return jmespath.search(expression, data, options=build_options(registry))


def compile(expression: str) -> ParsedResult:  # noqa: A001
    """Parse ``expression`` once for repeated ``search`` calls.

    Pass ``options=build_options()`` to ``ParsedResult.search``.
    """
    return jmespath.compile(expression)
