"""Typed arithmetic: add, subtract, multiply, divide, modulo.

Both positions accept any value; classification into operands and the
compatibility of the pair are decided by ``jmesplus.operands``.
"""
from __future__ import annotations

from typing import Any

from jmesplus.operands import parse_operands
from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.kinds import ValueKind

_ANY = ArgumentSpec.of(ValueKind.ANY)


def add(arguments: list[Any]) -> Any:
    left, right = parse_operands("add", arguments)
    return left.add(right)


def subtract(arguments: list[Any]) -> Any:
    left, right = parse_operands("subtract", arguments)
    return left.subtract(right)


def multiply(arguments: list[Any]) -> Any:
    left, right = parse_operands("multiply", arguments)
    return left.multiply(right)


def divide(arguments: list[Any]) -> Any:
    left, right = parse_operands("divide", arguments)
    return left.divide(right)


def modulo(arguments: list[Any]) -> Any:
    left, right = parse_operands("modulo", arguments)
    return left.modulo(right)


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec("add", (_ANY, _ANY), add, "Sum of numbers or durations"),
    FunctionSpec("subtract", (_ANY, _ANY), subtract, "Difference of numbers or durations"),
    FunctionSpec("multiply", (_ANY, _ANY), multiply, "Product; a duration may be scaled by a number"),
    FunctionSpec("divide", (_ANY, _ANY), divide, "Quotient; fails on a zero divisor"),
    FunctionSpec("modulo", (_ANY, _ANY), modulo, "Truncating remainder of integral operands"),
)
