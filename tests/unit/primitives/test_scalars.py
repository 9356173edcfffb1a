"""Tests for type, number, comparison and presence checks."""

from decimal import Decimal

import pytest

from fieldcheck.primitives.scalars import (
    accepted,
    alpha,
    alpha_numeric,
    array,
    boolean,
    confirm,
    decimal,
    equal_to,
    greater_than,
    greater_than_or_equal,
    in_list,
    in_range,
    integer,
    is_float,
    is_string,
    length,
    less_than,
    less_than_or_equal,
    lowercase,
    max_length,
    min_length,
    not_blank,
    not_empty,
    not_in,
    numeric,
    present,
    to_number,
    uppercase,
)


class TestToNumber:
    """Test numeric coercion."""

    def test_numbers_pass_through(self):
        assert to_number(5) == 5
        assert to_number(1.5) == 1.5
        assert to_number(Decimal("2.5")) == Decimal("2.5")

    def test_numeric_strings(self):
        assert to_number("5") == 5
        assert to_number(" -1.5 ") == -1.5
        assert to_number("1e3") == 1000.0
        assert to_number(".5") == 0.5

    @pytest.mark.parametrize("value", ["one", "", "1-2", "1.2.3", None, True, False, [1]])
    def test_rejects_non_numbers(self, value):
        assert to_number(value) is None


def test_accepted():
    assert accepted(True) is True
    assert accepted(1) is True
    assert accepted("1") is True
    assert accepted(True, [1]) is False
    assert accepted(0) is False
    assert accepted(None) is False


def test_alpha():
    assert alpha("foo") is True
    assert alpha("f00") is False
    assert alpha("") is False
    assert alpha(None) is False


def test_alpha_numeric():
    assert alpha_numeric("foo123") is True
    assert alpha_numeric("foo-") is False
    assert alpha_numeric(None) is False


def test_array():
    assert array({"foo": "bar"}) is True
    assert array(["foo"]) is True
    assert array(object()) is False
    assert array(None) is False


def test_boolean():
    assert boolean(None) is False
    for value in (True, False, 1, 0, "1", "0"):
        assert boolean(value) is True
    assert boolean("yes") is False
    assert boolean(2) is False
    assert boolean(1.0) is False


def test_decimal_and_float():
    assert decimal(256.0) is True
    assert decimal("512.00") is True
    assert decimal(1024.256) is True
    assert decimal("2048.512") is True
    assert decimal(32) is False
    assert decimal(None) is False

    assert is_float(123.45) is True
    assert is_float("123.45") is True
    assert is_float(123456) is False
    assert is_float("one") is False
    assert is_float("12345") is False


def test_integer():
    assert integer(1) is True
    assert integer("1") is True
    for value in ("one", 1.2, "12-000", "1234.56", 10.00, "10.00", -10.00, "-10.00", True, None, ""):
        assert integer(value) is False


def test_numeric():
    assert numeric(1) is True
    assert numeric("1") is True
    assert numeric(1.2) is True
    assert numeric("1.7") is True
    assert numeric("one") is False
    assert numeric(True) is False


def test_is_string():
    assert is_string("foo") is True
    assert is_string(1234) is False


def test_equal_to():
    assert equal_to(5, "5") is True
    assert equal_to(None, None) is True
    assert equal_to(10, 5) is False
    assert equal_to(None, 5) is False
    assert equal_to(10, None) is False


class TestComparisons:
    """Test numeric comparisons."""

    def test_greater_than(self):
        assert greater_than(2, 1) is True
        assert greater_than(2, 2) is False
        assert greater_than(None, 2) is False
        assert greater_than("3", 2) is True
        assert greater_than("three", 2) is False

    def test_greater_than_or_equal(self):
        assert greater_than_or_equal(2, 1) is True
        assert greater_than_or_equal(2, 2) is True
        assert greater_than_or_equal(2, 3) is False

    def test_less_than(self):
        assert less_than(1, 2) is True
        assert less_than(2, 2) is False
        assert less_than("abc", 2) is False

    def test_less_than_or_equal(self):
        assert less_than_or_equal(1, 2) is True
        assert less_than_or_equal(2, 2) is True
        assert less_than_or_equal(3, 2) is False

    def test_range_is_inclusive(self):
        assert in_range("xxx", 5, 10) is False
        assert in_range(5, 5, 10) is True
        assert in_range("5", 5, 10) is True
        assert in_range(5.2, 5.1111, 10.999) is True
        assert in_range(10, 5, 10) is True
        assert in_range(1, 5, 10) is False
        assert in_range(11, 5, 10) is False
        assert in_range(7, "low", 10) is False

    @pytest.mark.parametrize("nan", [Decimal("NaN"), Decimal("sNaN")])
    def test_decimal_nan_is_not_a_number(self, nan):
        assert to_number(nan) is None
        assert greater_than(nan, 1) is False
        assert less_than(nan, 1) is False
        assert greater_than_or_equal(1, nan) is False
        assert in_range(nan, 0, 10) is False
        assert in_range(5, nan, 10) is False
        assert equal_to(nan, 1) is False
        assert in_list(nan, [1, 2]) is False


class TestLists:
    """Test in_list and not_in."""

    def test_in_list(self):
        assert in_list("new", ["draft", "new", "published"]) is True
        assert in_list("dropped", ["draft", "new", "published"]) is False
        assert in_list(None, ["draft", "new", "published"]) is False
        assert in_list("1", [1, 2, 3]) is True

    def test_case_insensitive(self):
        assert in_list("NEW", ["draft", "new"]) is False
        assert in_list("NEW", ["draft", "new"], True) is True
        assert in_list("new", ["Draft", "New"], case_insensitive=True) is True

    def test_not_in(self):
        assert not_in("new", ["draft", "new", "published"]) is False
        assert not_in(None, [None, "new", "published"]) is False
        assert not_in("dropped", ["draft", "new", "published"]) is True


class TestLengths:
    """Test length checks."""

    def test_length(self):
        assert length("foo", 3) is True
        assert length("foo", 2) is False
        assert length(None, 2) is False

    def test_max_length(self):
        assert max_length("string", 10) is True
        assert max_length("string", 3) is False
        assert max_length(123456, 8) is True
        assert max_length(123456, 4) is False
        assert max_length(None, 3) is False

    def test_min_length(self):
        assert min_length("password", 8) is True
        assert min_length("nada", 8) is False
        assert min_length(123456, 4) is True
        assert min_length(123456, 8) is False
        assert min_length(None, 3) is False


def test_case():
    assert uppercase("FOO") is True
    assert uppercase("FOo") is False
    assert uppercase("") is False
    assert uppercase(None) is False
    assert lowercase("foo") is True
    assert lowercase("Foo") is False
    assert lowercase("") is False
    assert lowercase(None) is False


def test_not_blank():
    assert not_blank("foo") is True
    assert not_blank(" o") is True
    assert not_blank("o ") is True
    assert not_blank("0") is True
    assert not_blank(0) is True
    assert not_blank(False) is True
    assert not_blank("") is False
    assert not_blank(" ") is False
    assert not_blank("   ") is False
    assert not_blank(None) is False


def test_not_empty():
    assert not_empty("foo") is True
    assert not_empty({"key": "value"}) is True
    assert not_empty({"tmp_name": "foo"}) is True
    assert not_empty(0) is True
    assert not_empty(None) is False
    assert not_empty("") is False
    assert not_empty("  ") is False
    assert not_empty([]) is False
    assert not_empty({}) is False
    assert not_empty({"tmp_name": None}) is False


def test_present():
    assert present({"foo": None}, "foo") is True
    assert present({"foo": "bar"}, "foo") is True
    assert present({"foo": "bar"}, "bar") is False
    assert present({}, "bar") is False
    assert present(None, "bar") is False
    assert present("foo", None) is False


def test_confirm():
    assert confirm("secret", "password", {"password": "secret", "password_confirm": "secret"}) is True
    assert confirm("secret", "password", {"password": "secret", "password_confirm": "other"}) is False
    assert confirm("secret", "password", {"password": "secret"}) is False
