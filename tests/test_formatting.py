"""Tests for ym_core.formatting."""

from ym_core import PathKey
from ym_core.flattener import Entry
from ym_core.formatting import format_hit, format_scalar, truncate
from ym_core.matcher import SearchHit
from ym_core.values import VBool, VNull, VNumber, VText


def _hit(path, value, label="conf.yaml"):
    return SearchHit(label, Entry(PathKey.parse(path), value))


def test_format_scalar():
    assert format_scalar(VText("hello")) == "hello"
    assert format_scalar(VNumber(5432)) == "5432"
    assert format_scalar(VBool(True)) == "true"
    assert format_scalar(VNull()) == "null"


def test_format_hit_without_label():
    assert format_hit(_hit("app.version", VText("2.0.0"))) == "app.version=2.0.0"


def test_format_hit_with_label():
    line = format_hit(_hit("app.debug", VBool(True)), show_label=True)
    assert line == "conf.yaml:app.debug=true"


def test_format_hit_label_missing():
    assert format_hit(_hit("a", VNumber(1), label=None), show_label=True) == "a=1"


def test_truncate():
    assert truncate("abcdefghij", 8) == "abcde..."
    assert truncate("short", 80) == "short"
    assert truncate("anything", None) == "anything"


def test_format_hit_truncates():
    line = format_hit(_hit("key", VText("x" * 100)), width=20)
    assert len(line) == 20
    assert line.endswith("...")
