"""Tests for value variants and native conversion."""

from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction

import pytest

from tcl_list_encoder.domain.exceptions import (
    NestingTooDeepException,
    UnsupportedValueException,
)
from tcl_list_encoder.domain.values import Boolean, ListValue, Number, Text, to_value


class TestToValue:
    def test_text(self):
        assert to_value("abc") == Text("abc")

    def test_bool_before_int(self):
        assert to_value(True) == Boolean(True)
        assert isinstance(to_value(1), Number)

    def test_float(self):
        assert to_value(2.5) == Number(2.5)

    def test_nested(self):
        assert to_value([1, ["a"]]) == ListValue((Number(1), ListValue((Text("a"),))))

    def test_other_real_numbers(self):
        assert to_value(Decimal("2.5")) == Number(Decimal("2.5"))
        assert to_value(Fraction(3, 4)).to_text() == "3/4"

    def test_list_value_items_are_converted(self):
        value = ListValue(("a", [1]))
        assert to_value(value) == ListValue((Text("a"), ListValue((Number(1),))))

    def test_list_value_depth_is_checked(self):
        with pytest.raises(NestingTooDeepException):
            to_value(ListValue((ListValue(),)), max_depth=0)

    def test_variant_passes_through(self):
        value = Text("x")
        assert to_value(value) is value

    def test_set_is_iterable(self):
        assert to_value({"only"}) == ListValue((Text("only"),))

    @pytest.mark.parametrize("obj", [None, b"x", bytearray(b"x"), object(), OrderedDict(), 1j])
    def test_unsupported(self, obj):
        with pytest.raises(UnsupportedValueException):
            to_value(obj)

    def test_depth_limit(self):
        assert to_value([[1]], max_depth=1) == ListValue((ListValue((Number(1),)),))
        with pytest.raises(NestingTooDeepException):
            to_value([[[1]]], max_depth=1)

    def test_starting_depth(self):
        with pytest.raises(NestingTooDeepException):
            to_value([1], max_depth=0, depth=1)


class TestRendering:
    def test_number_text(self):
        assert Number(10).to_text() == "10"
        assert Number(0.1).to_text() == "0.1"

    def test_boolean_text(self):
        assert Boolean(True).to_text() == "1"
        assert Boolean(False).to_text() == "0"

    def test_variants_are_frozen(self):
        with pytest.raises(AttributeError):
            Text("a").value = "b"
