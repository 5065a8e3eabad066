"""Tests for getter access."""

import pytest

from ym_core import EmptyPath, NotFound, get_value, load_document
from ym_core.values import VMapping, VNumber, VSequence, VText


@pytest.fixture
def root():
    return load_document(
        "app:\n"
        "  name: demo\n"
        "  ports: [80, 443]\n"
        "  servers:\n"
        "    - host: a\n"
        "    - host: b\n"
        "  empty: {}\n"
    ).root


def test_getter_leaf(root):
    assert get_value(root, "app.name") == VText("demo")


def test_getter_mapping(root):
    result = get_value(root, "app")
    assert isinstance(result, VMapping)
    assert "name" in result.entries


def test_getter_accepts_pathkey(root):
    from ym_core import PathKey
    assert get_value(root, PathKey.parse("app.name")) == VText("demo")


def test_getter_index(root):
    assert get_value(root, "app.ports.1") == VNumber(443)
    assert get_value(root, "app.servers.0.host") == VText("a")


def test_getter_sequence(root):
    assert isinstance(get_value(root, "app.ports"), VSequence)


def test_getter_empty_mapping(root):
    assert get_value(root, "app.empty") == VMapping()


def test_getter_missing_key(root):
    assert get_value(root, "app.missing") is NotFound


def test_getter_through_scalar(root):
    assert get_value(root, "app.name.first") is NotFound


def test_getter_non_numeric_on_sequence(root):
    assert get_value(root, "app.ports.first") is NotFound


def test_getter_index_out_of_range(root):
    assert get_value(root, "app.ports.2") is NotFound


def test_getter_negative_index(root):
    assert get_value(root, "app.ports.-1") is NotFound


def test_getter_on_scalar_root():
    assert get_value(VText("x"), "a") is NotFound


def test_getter_empty_path(root):
    with pytest.raises(EmptyPath):
        get_value(root, "")


def test_getter_non_ascii_digit_index(root):
    # ARABIC-INDIC DIGIT ZERO is decimal but not a sequence index
    assert get_value(root, "app.ports.٠") is NotFound
    assert get_value(root, "app.ports.１") is NotFound
