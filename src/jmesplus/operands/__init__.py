"""Typed operands for the arithmetic functions.

Importing this package registers the built-in pairwise rules.
"""
from __future__ import annotations

from jmesplus.operands.base import OPERATIONS, Operand, rule
from jmesplus.operands.coercion import parse_operands, to_operand
from jmesplus.operands.variants import Duration, Number

__all__ = [
    "OPERATIONS",
    "Operand",
    "rule",
    "Number",
    "Duration",
    "parse_operands",
    "to_operand",
]
