"""path_canonicalize: lexical path cleaning, with no filesystem access."""
from __future__ import annotations

import posixpath
from typing import Any

from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.arguments import validate_arg
from jmesplus.validator.kinds import ValueKind

_STRING = ArgumentSpec.of(ValueKind.STRING)


def path_canonicalize(arguments: list[Any]) -> str:
    """Resolve ``.`` and ``..`` and collapse repeated separators.

    An empty path stays empty.  ``..`` never climbs above a leading ``/``.
    """
    path = validate_arg("path_canonicalize", arguments, 0, ValueKind.STRING)
    if not path:
        return ""
    cleaned = posixpath.normpath(path)
    # normpath keeps a POSIX "//" prefix; a rooted path has exactly one slash.
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec("path_canonicalize", (_STRING,), path_canonicalize, "Lexically clean a path"),
)
