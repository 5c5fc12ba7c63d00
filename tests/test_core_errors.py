"""Tests for core error types.

Tests the error hierarchy and rich context functionality.
"""

from __future__ import annotations

import pytest

from tsalign.core.errors import (
    ERROR_REGISTRY,
    EConfigInvalid,
    EInputInvalid,
    ESpanInvalid,
    TSAlignError,
    get_error_class,
)


class TestTSAlignError:
    """Test base error class."""

    def test_basic_error(self):
        """Basic error creation."""
        err = TSAlignError("Something went wrong")
        assert err.message == "Something went wrong"
        assert err.error_code == "E_UNKNOWN"
        assert err.context == {}

    def test_error_with_context(self):
        """Error with context."""
        err = TSAlignError("Test error", context={"index": 3})
        assert err.context == {"index": 3}
        assert "index" in str(err)

    def test_error_with_fix_hint(self):
        """Explicit fix hint overrides the class hint."""
        err = EConfigInvalid("Bad option", fix_hint="Use linear")
        assert err.fix_hint == "Use linear"
        assert "[hint: Use linear]" in str(err)

    def test_error_str_format(self):
        """Error string formatting."""
        err = EInputInvalid("Test message", context={"key": "value"})
        err_str = str(err)
        assert err_str.startswith("[E_INPUT_INVALID] Test message")
        assert "key" in err_str
        assert "hint:" in err_str


class TestErrorSubclasses:
    """Test specific error classes."""

    @pytest.mark.parametrize("cls", [EConfigInvalid, EInputInvalid, ESpanInvalid])
    def test_inherits_base(self, cls):
        """All errors derive from TSAlignError and carry a hint."""
        err = cls("msg")
        assert isinstance(err, TSAlignError)
        assert err.fix_hint

    def test_can_be_caught_as_base(self):
        """Subclasses are caught by the base class."""
        with pytest.raises(TSAlignError):
            raise ESpanInvalid("bad span")

    def test_each_subclass_has_own_registered_code(self):
        """Subclasses carry distinct codes, all present in the registry."""
        classes = [EConfigInvalid, EInputInvalid, ESpanInvalid]
        codes = {cls.error_code for cls in classes}
        assert len(codes) == len(classes)
        assert TSAlignError.error_code not in codes
        for cls in classes:
            assert ERROR_REGISTRY[cls.error_code] is cls


class TestErrorRegistry:
    """Test error registry lookup."""

    def test_registry_codes_match_classes(self):
        """Each code maps to the class declaring it."""
        for code, cls in ERROR_REGISTRY.items():
            assert cls.error_code == code

    def test_get_error_class(self):
        """Lookup by code."""
        assert get_error_class("E_CONFIG_INVALID") is EConfigInvalid

    def test_get_unknown_error_class(self):
        """Unknown codes fall back to the base class."""
        assert get_error_class("E_NOPE") is TSAlignError
