"""Tests for advisory check diagnostics."""

import pytest

import shapes
from shapes.config import settings


def _failures(logs):
    return [entry for entry in logs if entry["event"] == "shape_check_failed"]


class TestDiagnostics:
    """Failing checks log structured events; passing checks log nothing."""

    def test_success_is_silent(self, user_shape, valid_user, diagnostics):
        assert user_shape.check(valid_user)
        assert diagnostics == []

    def test_not_an_object(self, user_shape, diagnostics):
        assert not user_shape.check("jakob")
        [entry] = _failures(diagnostics)
        assert entry["log_level"] == "warning"
        assert entry["shape"] == "User"
        assert entry["reason"] == "not_an_object"
        assert entry["actual_kind"] == "string"

    def test_unknown_property(self, user_shape, valid_user, diagnostics):
        valid_user["extra"] = 1
        assert not user_shape.check(valid_user)
        [entry] = _failures(diagnostics)
        assert entry["reason"] == "unknown_property"
        assert entry["property"] == "extra"

    def test_missing_property(self, user_shape, valid_user, diagnostics):
        del valid_user["hasSignedIn"]
        assert not user_shape.check(valid_user)
        [entry] = _failures(diagnostics)
        assert entry["reason"] == "missing_property"
        assert entry["property"] == "hasSignedIn"
        assert entry["expected"] == "boolean"

    def test_invalid_property(self, user_shape, valid_user, diagnostics):
        valid_user["age"] = "29"
        assert not user_shape.check(valid_user)
        [entry] = _failures(diagnostics)
        assert entry["reason"] == "invalid_property"
        assert entry["property"] == "age"
        assert entry["value"] == "'29'"
        assert entry["actual_kind"] == "string"
        assert entry["expected"] == "number"

    def test_first_failing_property_ends_the_check(self, user_shape, diagnostics):
        assert not user_shape.check({"name": 1, "age": "x", "hasSignedIn": "no"})
        assert [entry["property"] for entry in _failures(diagnostics)] == ["name"]

    def test_nested_failure_logs_each_level(self, user_shape, valid_user, diagnostics):
        valid_user["permissions"] = ["developer", 7]
        assert not user_shape.check(valid_user)
        inner, outer = _failures(diagnostics)
        assert inner["shape"] == "Array<string>"
        assert inner["reason"] == "invalid_element"
        assert inner["index"] == 1
        assert inner["value"] == "7"
        assert inner["actual_kind"] == "number"
        assert inner["expected"] == "string"
        assert outer["shape"] == "User"
        assert outer["property"] == "permissions"
        assert outer["expected"] == "Array<string> | undefined"

    def test_not_an_array(self, diagnostics):
        assert not shapes.array(shapes.number()).check({"0": 1})
        [entry] = _failures(diagnostics)
        assert entry["reason"] == "not_an_array"
        assert entry["actual_kind"] == "object"

    def test_value_preview_is_truncated(self, monkeypatch, diagnostics):
        monkeypatch.setattr(settings, "PREVIEW_LENGTH", 10)
        assert not shapes.array(shapes.number()).check(["x" * 100])
        [entry] = _failures(diagnostics)
        assert entry["value"] == "'xxxxxxxxx..."

    def test_disabled_diagnostics(self, monkeypatch, user_shape, diagnostics):
        monkeypatch.setattr(settings, "DIAGNOSTICS", False)
        assert not user_shape.check({"unexpected": True})
        assert diagnostics == []

    @pytest.mark.parametrize("enabled", [True, False])
    def test_diagnostics_never_change_the_verdict(self, monkeypatch, user_shape, valid_user, enabled):
        monkeypatch.setattr(settings, "DIAGNOSTICS", enabled)
        assert user_shape.check(valid_user)
        valid_user["age"] = None
        assert not user_shape.check(valid_user)
