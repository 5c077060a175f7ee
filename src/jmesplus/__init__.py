"""jmesplus — typed extension functions for JMESPath expressions.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import jmesplus

    jmesplus.search("to_upper(metadata.name)", {"metadata": {"name": "web"}})
    # 'WEB'

    jmesplus.search("divide(`10`, `4`)", {})
    # 2.5

    jmesplus.search("add('1h', '30m')", {})
    # '1h30m0s'

    # Reuse the function set with the jmespath API directly
    import jmespath
    options = jmesplus.build_options()
    jmespath.search("semver_compare(version, '>=1.0.0 <2.0.0')",
                    {"version": "1.4.2"}, options=options)
    # True

    jmesplus.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jmesplus.registry import (
    ArgumentSpec,
    DuplicateFunctionError,
    FunctionNotFoundError,
    FunctionRegistry,
    FunctionSpec,
)
from jmesplus.validator import (
    FunctionError,
    InvalidArgumentTypeError,
    NonFiniteArgumentError,
    NonIntegerModuloError,
    UndefinedQuotientError,
    ValueKind,
    ZeroDivisorError,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    import jmespath
    from jmespath.parser import ParsedResult


def search(expression: str, data: Any, registry: FunctionRegistry | None = None) -> Any:
    """Evaluate a JMESPath expression with the extension functions loaded.

    Parameters
    ----------
    expression:
        JMESPath expression text.
    data:
        The JSON-compatible document to evaluate against.
    registry:
        Functions to expose.  Defaults to ``default_registry()``.

    Returns
    -------
    Any
        The expression result.

    Raises
    ------
    jmespath.exceptions.ParseError
        If the expression is syntactically invalid.
    FunctionError
        If an extension function rejects its arguments or fails.
    """
    from jmesplus.evaluator.options import search as _search

    return _search(expression, data, registry=registry)


def compile(expression: str) -> "ParsedResult":  # noqa: A001
    """Parse an expression once for repeated evaluation.

    Pass ``options=jmesplus.build_options()`` to the result's ``search``.
    """
    from jmesplus.evaluator.options import compile as _compile

    return _compile(expression)


def build_options(registry: FunctionRegistry | None = None) -> "jmespath.Options":
    """Return ``jmespath.Options`` carrying the extension functions.

    Parameters
    ----------
    registry:
        Functions to expose.  Defaults to ``default_registry()``.
    """
    from jmesplus.evaluator.options import build_options as _build_options

    return _build_options(registry)


def default_registry() -> FunctionRegistry:
    """Return the shared registry of built-in functions."""
    from jmesplus.registry.registry import default_registry as _default_registry

    return _default_registry()


__all__ = [
    "__version__",
    "search",
    "compile",
    "build_options",
    "default_registry",
    "ArgumentSpec",
    "FunctionSpec",
    "FunctionRegistry",
    "FunctionNotFoundError",
    "DuplicateFunctionError",
    "ValueKind",
    "FunctionError",
    "InvalidArgumentTypeError",
    "ZeroDivisorError",
    "UndefinedQuotientError",
    "NonIntegerModuloError",
    "NonFiniteArgumentError",
]
