"""Flattener: walk a document tree and yield its scalar leaves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .path import PathKey
from .values import Value, VMapping, VSequence


@dataclass(frozen=True)
class Entry:
    """A leaf of a document together with the path that reaches it."""

    path: PathKey
    value: Value

    def __str__(self) -> str:
        return f"{self.path}={self.value}"


def flatten(value: Value) -> Iterator[Entry]:
    """Yield an Entry for every scalar in *value*, in document order.

    Mapping keys are visited in insertion order and sequence elements by
    index.  Empty mappings and sequences produce no entries, and a scalar
    root produces none either since it has no path.
    """
    yield from _walk(value, ())


def _walk(value: Value, prefix: tuple[str, ...]) -> Iterator[Entry]:
    if isinstance(value, VMapping):
        children = value.entries.items()
    elif isinstance(value, VSequence):
        children = ((str(i), item) for i, item in enumerate(value.items))
    else:
        if prefix:
            yield Entry(PathKey(prefix), value)
        return

    for key, child in children:
        yield from _walk(child, prefix + (key,))
