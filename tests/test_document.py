"""Tests for ym_core.document."""

from ym_core import Document, NotFound, load_document
from ym_core.values import VMapping, VNumber, VText


def test_default_document_is_empty_mapping():
    doc = Document()
    assert doc.root == VMapping()
    assert doc.label is None
    assert not doc.dirty


def test_set_marks_dirty():
    doc = load_document("a: 1\n")
    doc.set("b", VNumber(2))
    assert doc.dirty
    assert doc.get("b") == VNumber(2)


def test_delete_miss_leaves_clean():
    doc = load_document("a: 1\n")
    assert doc.delete("x") is False
    assert not doc.dirty


def test_delete_hit_marks_dirty():
    doc = load_document("a: 1\n")
    assert doc.delete("a") is True
    assert doc.dirty
    assert doc.get("a") is NotFound


def test_set_on_scalar_root_replaces_root():
    doc = load_document("just text\n")
    assert doc.root == VText("just text")
    doc.set("a", VNumber(1))
    assert doc.root == VMapping({"a": VNumber(1)})


def test_entries():
    doc = load_document("a:\n  b: 1\nc: x\n")
    assert [str(e) for e in doc.entries()] == ["a.b=1", "c=x"]
