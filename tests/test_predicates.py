"""Tests for the primitive predicates and the UNDEFINED sentinel."""

import copy
import json
import math
import pickle

import pytest

from shapes.predicates import (
    UNDEFINED,
    Undefined,
    is_array,
    is_boolean,
    is_null,
    is_number,
    is_object,
    is_string,
    is_undefined,
    kind_of,
)


class TestUndefined:
    """Test the "key not present" sentinel."""

    def test_singleton(self):
        assert Undefined() is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_distinct_from_none(self):
        assert UNDEFINED is not None
        assert not UNDEFINED
        assert repr(UNDEFINED) == "undefined"


class TestPredicates:
    """Each predicate accepts exactly its own kind."""

    @pytest.mark.parametrize("value", [0, 42, -1.5, 1e308, 10**400, json.loads("3.25")])
    def test_is_number_accepts_finite(self, value):
        assert is_number(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, True, False, "42", None, UNDEFINED])
    def test_is_number_rejects(self, value):
        assert not is_number(value)

    def test_nan_from_json_is_not_a_number(self):
        assert not is_number(json.loads("NaN"))

    def test_is_string(self):
        assert is_string("")
        assert is_string("test string")
        assert not is_string(42)
        assert not is_string(b"bytes")

    def test_is_boolean(self):
        assert is_boolean(True)
        assert is_boolean(False)
        assert not is_boolean(0)
        assert not is_boolean(1)
        assert not is_boolean("false")

    def test_null_and_undefined_are_separate(self):
        assert is_null(None)
        assert not is_null(UNDEFINED)
        assert is_undefined(UNDEFINED)
        assert not is_undefined(None)

    def test_is_object(self):
        assert is_object({})
        assert is_object({"foo": "bar"})
        assert not is_object(None)
        assert not is_object([])
        assert not is_object("{}")

    def test_is_array(self):
        assert is_array([])
        assert is_array([0])
        assert is_array((1, 2))
        assert not is_array("abc")
        assert not is_array({"0": 1})
        assert not is_array(None)


class TestKindOf:
    """Test diagnostic kind names."""

    @pytest.mark.parametrize("value, kind", [
        ("x", "string"),
        (1, "number"),
        (math.nan, "number"),
        (True, "boolean"),
        (None, "null"),
        (UNDEFINED, "undefined"),
        ({}, "object"),
        ([], "array"),
        ({1, 2}, "set"),
    ])
    def test_kind_of(self, value, kind):
        assert kind_of(value) == kind
