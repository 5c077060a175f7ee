"""Immutable registry of extension functions.

The registry is built once from an ordered iterable of ``FunctionSpec``
and never changes afterwards, so any number of evaluations may read it
concurrently.  Extending it produces a new registry.

Third-party packages can publish additional functions by declaring an
entry-point in the "jmesplus.functions" group whose value is an iterable
of ``FunctionSpec``.

Example
-------
::

    from jmesplus.registry import ArgumentSpec, FunctionRegistry, FunctionSpec
    from jmesplus.validator import ValueKind

    def _reverse(arguments):
        return arguments[0][::-1]

    registry = default_registry().merged([
        FunctionSpec("reverse_text", (ArgumentSpec.of(ValueKind.STRING),), _reverse),
    ])
    "reverse_text" in registry   # True
"""
from __future__ import annotations

import functools
import importlib.metadata
import logging
from collections.abc import Iterable, Iterator
from typing import Final

from jmesplus.registry.spec import FunctionSpec

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP: Final[str] = "jmesplus.functions"


class FunctionNotFoundError(KeyError):
    """Raised when a requested function name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.function_name = name
        super().__init__(f"Function {name!r} is not registered.")


class DuplicateFunctionError(ValueError):
    """Raised when two specs share a name."""

    def __init__(self, name: str) -> None:
        self.function_name = name
        super().__init__(
            f"Function {name!r} is already registered. "
            "Function names must be unique within a registry."
        )


class FunctionRegistry:
    """Ordered, read-only collection of ``FunctionSpec``.

    Parameters
    ----------
    specs:
        The functions to expose, in registration order.

    Raises
    ------
    DuplicateFunctionError
        If two specs share a name.
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: Iterable[FunctionSpec] = ()) -> None:
        table: dict[str, FunctionSpec] = {}
        for spec in specs:
            if spec.name in table:
                raise DuplicateFunctionError(spec.name)
            table[spec.name] = spec
        self._specs = table
        logger.debug("Built function registry with %d function(s)", len(table))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> FunctionSpec:
        """Return the ``FunctionSpec`` registered under ``name``.

        Raises
        ------
        FunctionNotFoundError
            If no function is registered under ``name``.
        """
        try:
            return self._specs[name]
        except KeyError:
            raise FunctionNotFoundError(name) from None

    def names(self) -> list[str]:
        """Return function names in registration order."""
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[FunctionSpec]:
        return iter(self._specs.values())

    def __repr__(self) -> str:
        return f"FunctionRegistry(functions={self.names()})"

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def merged(self, specs: Iterable[FunctionSpec]) -> FunctionRegistry:
        """Return a new registry with ``specs`` appended.

        Raises
        ------
        DuplicateFunctionError
            If any of ``specs`` reuses an existing name.
        """
        return FunctionRegistry([*self, *specs])

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> FunctionRegistry:
        """Return a new registry extended with entry-point published functions.

        Each entry-point in ``group`` must load to an iterable of
        ``FunctionSpec``.  Entry-points that fail to load, or whose
        functions collide with names already present, are logged and
        skipped so that one broken plugin cannot disable the rest.
        """
        registry = self
        for ep in importlib.metadata.entry_points(group=group):
            try:
                specs = list(ep.load())
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                registry = registry.merged(specs)
            except (DuplicateFunctionError, AttributeError):
                logger.warning(
                    "Entry-point %r loaded but its functions could not be "
                    "registered; skipping.",
                    ep.name,
                )
                continue
            logger.debug("Loaded %d function(s) from entry-point %r", len(specs), ep.name)
        return registry


@functools.lru_cache(maxsize=None)
def default_registry() -> FunctionRegistry:
    """Return the registry of built-in functions.

    Built once on first use and shared afterwards.
    """
    from jmesplus.functions import BUILTIN_FUNCTIONS

    return FunctionRegistry(BUILTIN_FUNCTIONS)
