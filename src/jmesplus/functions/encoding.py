"""Base64 and JSON decoding.

Decoder failures are not wrapped: ``binascii.Error`` (bad Base64),
``UnicodeDecodeError`` (decoded bytes are not UTF-8) and
``json.JSONDecodeError`` reach the caller as raised.
"""
from __future__ import annotations

import base64
import json
from typing import Any

from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.arguments import validate_arg
from jmesplus.validator.kinds import ValueKind

_STRING = ArgumentSpec.of(ValueKind.STRING)


def base64_decode(arguments: list[Any]) -> str:
    text = validate_arg("base64_decode", arguments, 0, ValueKind.STRING)
    return base64.b64decode(text, validate=True).decode("utf-8")


def base64_encode(arguments: list[Any]) -> str:
    text = validate_arg("base64_encode", arguments, 0, ValueKind.STRING)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def parse_json(arguments: list[Any]) -> Any:
    text = validate_arg("parse_json", arguments, 0, ValueKind.STRING)
    return json.loads(text)


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec("base64_decode", (_STRING,), base64_decode, "Decode standard padded Base64"),
    FunctionSpec("base64_encode", (_STRING,), base64_encode, "Encode as standard padded Base64"),
    FunctionSpec("parse_json", (_STRING,), parse_json, "Decode JSON text into a value"),
)
