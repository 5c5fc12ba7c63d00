"""Tests for tsalign.describe() API discovery function."""

from __future__ import annotations

import json

from tsalign.discovery import describe


def test_describe_returns_dict() -> None:
    """describe() returns a dictionary."""
    result = describe()
    assert isinstance(result, dict)


def test_describe_has_expected_top_level_keys() -> None:
    """Result has version, apis, strategies, default_options, error_codes."""
    result = describe()
    expected_keys = {"version", "apis", "strategies", "default_options", "error_codes"}
    assert expected_keys.issubset(result.keys())


def test_describe_version_matches_package() -> None:
    """version field matches tsalign.__version__."""
    import tsalign

    assert describe()["version"] == tsalign.__version__


def test_describe_strategies() -> None:
    """All strategy names are listed."""
    strategies = describe()["strategies"]
    assert strategies["interpolation"] == ["none", "previous", "next", "linear"]
    assert strategies["extrapolation"] == ["none", "null", "zero", "nearest", "linear"]


def test_describe_apis_exist() -> None:
    """Every listed API function is exported by tsalign."""
    import tsalign

    for entry in describe()["apis"].values():
        assert hasattr(tsalign, entry["function"]), entry["function"]


def test_describe_error_codes_contains_registry() -> None:
    """error_codes contains all entries from ERROR_REGISTRY."""
    from tsalign.core.errors import ERROR_REGISTRY

    error_codes = describe()["error_codes"]
    for code in ERROR_REGISTRY:
        assert code in error_codes, f"Missing error code: {code}"
        assert {"class", "description", "fix_hint"} <= error_codes[code].keys()


def test_describe_is_json_serializable() -> None:
    """The schema serializes to JSON."""
    json.dumps(describe())
