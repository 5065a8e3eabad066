"""Tests for ym_core.matcher."""

import pytest

from ym_core import (
    Document,
    InvalidPattern,
    compile_pattern,
    flatten,
    load_document,
    matches,
    search,
)


@pytest.fixture
def db_doc():
    return load_document(
        "database:\n"
        "  primary:\n"
        "    host: db1\n"
        "    password: x\n"
        "  replica:\n"
        "    host: db2\n"
        "    password: y\n"
        "cache:\n"
        "  host: redis\n",
        label="db.yaml",
    )


def _paths(hits):
    return [str(h.entry.path) for h in hits]


def test_compile_invalid_pattern():
    with pytest.raises(InvalidPattern) as exc_info:
        compile_pattern("data(base")
    assert "data(base" in str(exc_info.value)


def test_search_with_invalid_pattern_fails_before_documents():
    def documents():
        raise AssertionError("documents must not be consumed")
        yield  # pragma: no cover

    with pytest.raises(InvalidPattern):
        search("[", documents())


def test_substring_semantics(db_doc):
    pattern = compile_pattern("password")
    hits = [e for e in flatten(db_doc.root) if matches(pattern, e)]
    assert [str(e.path) for e in hits] == [
        "database.primary.password",
        "database.replica.password",
    ]


def test_wildcard_pattern(db_doc):
    hits = search(r"database\..*\.password", [db_doc])
    assert _paths(hits) == [
        "database.primary.password",
        "database.replica.password",
    ]


def test_anchored_pattern(db_doc):
    assert _paths(search(r"^cache\.host$", [db_doc])) == ["cache.host"]


def test_no_match(db_doc):
    assert list(search("nothing_here", [db_doc])) == []


def test_hits_carry_label_and_value(db_doc):
    (hit,) = search("replica.password", [db_doc])
    assert hit.label == "db.yaml"
    assert str(hit.entry.value) == "y"


def test_documents_processed_in_caller_order():
    a = load_document("host: a\n", label="a.yaml")
    b = load_document("host: b\n", label="b.yaml")
    hits = list(search("host", [b, a]))
    assert [h.label for h in hits] == ["b.yaml", "a.yaml"]


def test_document_without_label():
    hits = list(search("x", [Document(load_document("x: 1").root)]))
    assert hits[0].label is None


def test_sequence_index_in_path():
    doc = load_document("servers:\n  - host: a\n  - host: b\n")
    assert _paths(search(r"servers\.1\.", [doc])) == ["servers.1.host"]
