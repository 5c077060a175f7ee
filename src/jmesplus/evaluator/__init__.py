"""Evaluator integration.

Exports ``RegistryFunctions`` (the ``jmespath`` function provider),
``build_options`` and the ``search`` / ``compile`` helpers.
"""
from __future__ import annotations

from jmesplus.evaluator.options import RegistryFunctions, build_options, compile, search

__all__ = ["RegistryFunctions", "build_options", "search", "compile"]
