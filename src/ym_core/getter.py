"""Getter resolution for ym-core."""

from __future__ import annotations

from .path import PathKey
from .values import Value, VMapping, VSequence, _NotFound, NotFound


def sequence_index(seq: VSequence, segment: str) -> int | None:
    """Index addressed by *segment* in *seq*, or ``None`` if it is not one.

    Only plain non-negative decimal segments within range are accepted.
    """
    if not (segment.isascii() and segment.isdecimal()):
        return None
    idx = int(segment)
    if idx < len(seq.items):
        return idx
    return None


def child_of(node: Value, segment: str) -> Value | _NotFound:
    """Resolve a single segment on *node*.

    - VMapping: key lookup
    - VSequence: 0-based decimal index
    - scalars: NotFound
    """
    if isinstance(node, VMapping):
        return node.entries.get(segment, NotFound)

    if isinstance(node, VSequence):
        idx = sequence_index(node, segment)
        if idx is None:
            return NotFound
        return node.items[idx]

    return NotFound


def get_value(tree: Value, path: PathKey | str) -> Value | _NotFound:
    """Return the node at *path* or ``NotFound`` if any segment misses."""
    path = PathKey.coerce(path)
    current: Value | _NotFound = tree
    for segment in path:
        current = child_of(current, segment)
        if current is NotFound:
            return NotFound
    return current
