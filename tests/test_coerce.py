"""Tests for ym_core.coerce."""

import pytest

from ym_core.coerce import coerce_scalar
from ym_core.values import VBool, VNumber, VText


def test_true_false():
    assert coerce_scalar("true") == VBool(True)
    assert coerce_scalar("false") == VBool(False)


def test_bool_is_case_sensitive():
    assert coerce_scalar("True") == VText("True")


def test_integer():
    result = coerce_scalar("42")
    assert result == VNumber(42)
    assert isinstance(result.value, int)


def test_negative_integer():
    assert coerce_scalar("-7") == VNumber(-7)


def test_float():
    result = coerce_scalar("3.14")
    assert isinstance(result.value, float)
    assert result.value == 3.14


@pytest.mark.parametrize("raw", ["1e3", ".5", "2.", "-0.25"])
def test_float_forms(raw):
    assert coerce_scalar(raw) == VNumber(float(raw))


@pytest.mark.parametrize("raw", ["2.0.0", "1_000", "nan", "inf", " 1", "0x10", "", "hello world"])
def test_falls_back_to_text(raw):
    assert coerce_scalar(raw) == VText(raw)


def test_text_kept_verbatim():
    assert coerce_scalar("a=b") == VText("a=b")
