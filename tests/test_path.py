"""Tests for ym_core.path."""

import pytest

from ym_core import EmptyPath, PathKey


class TestParse:
    def test_single_segment(self):
        assert PathKey.parse("name").segments == ("name",)

    def test_nested(self):
        assert PathKey.parse("database.primary.host").segments == (
            "database", "primary", "host",
        )

    def test_empty_text(self):
        with pytest.raises(EmptyPath):
            PathKey.parse("")

    def test_empty_segments_constructor(self):
        with pytest.raises(EmptyPath):
            PathKey(())

    def test_index_segment_is_opaque(self):
        assert PathKey.parse("servers.0.host").segments == ("servers", "0", "host")

    def test_coerce_passes_pathkey_through(self):
        p = PathKey.parse("a.b")
        assert PathKey.coerce(p) is p
        assert PathKey.coerce("a.b") == p


@pytest.mark.parametrize("text", ["a", "a.b", "app.version", "x.0.y", "ключ.値"])
def test_round_trip(text):
    assert PathKey.parse(text).render() == text
    assert PathKey.parse(PathKey.parse(text).render()) == PathKey.parse(text)


def test_str_is_render():
    assert str(PathKey(("a", "b"))) == "a.b"


def test_equality_and_hash():
    assert PathKey.parse("a.b") == PathKey(("a", "b"))
    assert len({PathKey.parse("a.b"), PathKey(("a", "b"))}) == 1
    assert PathKey.parse("a.b") != PathKey.parse("a.c")


class TestStructure:
    def test_name_and_parent(self):
        p = PathKey.parse("a.b.c")
        assert p.name == "c"
        assert p.parent == PathKey.parse("a.b")

    def test_top_level_parent(self):
        assert PathKey.parse("a").parent is None

    def test_child(self):
        assert PathKey.parse("a").child("b") == PathKey.parse("a.b")

    def test_prefixes(self):
        assert list(PathKey.parse("a.b.c").prefixes()) == [
            PathKey.parse("a"), PathKey.parse("a.b"),
        ]

    def test_len_and_iter(self):
        p = PathKey.parse("a.b.c")
        assert len(p) == 3
        assert list(p) == ["a", "b", "c"]


class TestIsPrefixOf:
    def test_proper_prefix(self):
        assert PathKey.parse("a.b").is_prefix_of(PathKey.parse("a.b.c"))

    def test_self(self):
        assert PathKey.parse("a.b").is_prefix_of(PathKey.parse("a.b"))

    def test_longer_is_not_prefix(self):
        assert not PathKey.parse("a.b.c").is_prefix_of(PathKey.parse("a.b"))

    def test_segment_wise_not_textual(self):
        assert not PathKey.parse("a.b").is_prefix_of(PathKey.parse("a.bc"))
