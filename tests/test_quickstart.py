"""Test that the quickstart API works for jmesplus."""
from __future__ import annotations


def test_quickstart_search_import() -> None:
    import jmesplus

    assert callable(jmesplus.search)
    assert callable(jmesplus.build_options)


def test_quickstart_version(expected_version: str) -> None:
    import jmesplus

    assert jmesplus.__version__ == expected_version


def test_quickstart_search() -> None:
    import jmesplus

    result = jmesplus.search("to_upper(metadata.name)", {"metadata": {"name": "web"}})
    assert result == "WEB"


def test_quickstart_duration_arithmetic() -> None:
    import jmesplus

    assert jmesplus.search("add('1h', '30m')", {}) == "1h30m0s"


def test_quickstart_plain_jmespath() -> None:
    import jmespath

    import jmesplus

    options = jmesplus.build_options()
    result = jmespath.search(
        "semver_compare(version, '>=1.0.0 <2.0.0')", {"version": "1.4.2"}, options=options
    )
    assert result is True


def test_quickstart_registry_repr() -> None:
    import jmesplus

    assert "FunctionRegistry" in repr(jmesplus.default_registry())
