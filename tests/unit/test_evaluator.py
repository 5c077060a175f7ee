"""Unit tests for jmesplus.evaluator — registry-backed function dispatch
inside real jmespath expressions.
"""
from __future__ import annotations

from typing import Any

import jmespath
import pytest
from jmespath import exceptions

import jmesplus
from jmesplus.evaluator import RegistryFunctions, build_options, compile, search
from jmesplus.registry import ArgumentSpec, FunctionRegistry, FunctionSpec
from jmesplus.validator import (
    InvalidArgumentTypeError,
    ValueKind,
    ZeroDivisorError,
)

_POD: dict[str, Any] = {
    "metadata": {
        "name": "web-7f9c",
        "labels": {"app": "web", "tier": "frontend"},
        "creationTimestamp": "2024-03-01T10:00:00Z",
    },
    "spec": {
        "containers": [
            {"name": "nginx", "image": "nginx:1.25.3"},
            {"name": "sidecar", "image": "envoy:v1.29.0"},
        ],
    },
}


def _reverse(arguments: list[Any]) -> str:
    return arguments[0][::-1]


# ===========================================================================
# Extension functions inside expressions
# ===========================================================================


class TestSearch:
    def test_string_function(self) -> None:
        assert search("to_upper(metadata.name)", _POD) == "WEB-7F9C"

    def test_projection_through_function(self) -> None:
        result = search("spec.containers[].to_upper(name)", _POD)
        assert result == ["NGINX", "SIDECAR"]

    def test_nested_calls(self) -> None:
        assert search("truncate(to_upper(metadata.name), `3`)", _POD) == "WEB"

    def test_object_arguments(self) -> None:
        assert search("label_match(`{\"app\": \"web\"}`, metadata.labels)", _POD) is True

    def test_arithmetic_on_literals(self) -> None:
        assert search("add('1h', '30m')", {}) == "1h30m0s"
        assert search("divide(`10`, `4`)", {}) == 2.5

    def test_time_since_with_fixed_end(self) -> None:
        expression = "time_since('', metadata.creationTimestamp, '2024-03-02T10:30:00Z')"
        assert search(expression, _POD) == "24h30m0s"

    def test_semver_filter(self) -> None:
        data = {"versions": ["0.9.0", "1.2.0", "2.0.0"]}
        result = search("versions[?semver_compare(@, '>=1.0.0 <2.0.0')]", data)
        assert result == ["1.2.0"]

    def test_standard_functions_still_available(self) -> None:
        assert search("length(spec.containers)", _POD) == 2
        assert search("join(',', sort(keys(metadata.labels)))", _POD) == "app,tier"

    def test_result_feeds_standard_function(self) -> None:
        assert search("length(split('a,b,c', ','))", {}) == 3


class TestErrors:
    def test_unknown_function(self) -> None:
        with pytest.raises(exceptions.UnknownFunctionError):
            search("no_such_function(@)", {})

    def test_arity_mismatch(self) -> None:
        with pytest.raises(exceptions.ArityError):
            search("to_upper('a', 'b')", {})

    def test_argument_kind_checked_before_handler(self) -> None:
        with pytest.raises(InvalidArgumentTypeError) as info:
            search("to_upper(`1`)", {})
        assert info.value.position == 1

    def test_function_failure_propagates(self) -> None:
        with pytest.raises(ZeroDivisorError):
            search("divide(`1`, `0`)", {})

    def test_failures_are_jmespath_errors(self) -> None:
        with pytest.raises(exceptions.JMESPathError):
            search("modulo(`1.5`, `1`)", {})

    def test_parse_error(self) -> None:
        with pytest.raises(exceptions.ParseError):
            search("to_upper(", {})


# ===========================================================================
# Options / custom registries
# ===========================================================================


class TestOptions:
    def test_options_work_with_plain_jmespath(self, options: jmespath.Options) -> None:
        assert jmespath.search("to_lower('ABC')", {}, options=options) == "abc"

    def test_default_registry_used(self) -> None:
        provider = RegistryFunctions()
        assert "semver_compare" in provider.registry

    def test_custom_registry_adds_function(self, registry: FunctionRegistry) -> None:
        extended = registry.merged(
            [FunctionSpec("reverse_text", (ArgumentSpec.of(ValueKind.STRING),), _reverse)]
        )
        assert search("reverse_text('abc')", {}, registry=extended) == "cba"

    def test_restricted_registry_hides_builtins(self) -> None:
        restricted = FunctionRegistry(
            [FunctionSpec("reverse_text", (ArgumentSpec.of(ValueKind.STRING),), _reverse)]
        )
        with pytest.raises(exceptions.UnknownFunctionError):
            search("to_upper('a')", {}, registry=restricted)
        assert search("length('abc')", {}, registry=restricted) == 3

    def test_compiled_expression_reused(self) -> None:
        parsed = compile("to_upper(name)")
        options = build_options()
        assert parsed.search({"name": "a"}, options=options) == "A"
        assert parsed.search({"name": "b"}, options=options) == "B"


class TestPackageApi:
    def test_top_level_search(self) -> None:
        assert jmesplus.search("equal_fold('Go', 'GO')", {}) is True

    def test_top_level_compile(self) -> None:
        parsed = jmesplus.compile("base64_encode(@)")
        assert parsed.search("hello", options=jmesplus.build_options()) == "aGVsbG8="

    def test_top_level_default_registry(self) -> None:
        assert len(jmesplus.default_registry()) == 25
