"""CLI package.

The ``cli`` sub-package contains the Click application and all
command implementations.  It should import only from the public API
and the registry/evaluator packages, never from function modules directly.
"""
from __future__ import annotations
