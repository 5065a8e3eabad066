"""Setter and delete resolution for ym-core."""

from __future__ import annotations

import logging

from .getter import child_of, sequence_index
from .path import PathKey
from .values import Value, VMapping, VSequence, NotFound

logger = logging.getLogger(__name__)


def set_value(tree: Value, path: PathKey | str, value: Value) -> Value:
    """Store *value* at *path*, creating intermediate mappings as needed.

    Returns the root, which is a new empty VMapping if *tree* was not a
    mapping.  Any scalar or sequence sitting where an intermediate mapping
    is needed is replaced by an empty one; an existing value at the final
    segment is overwritten in place, whatever its type.
    """
    path = PathKey.coerce(path)
    root = tree if isinstance(tree, VMapping) else VMapping()

    current = root
    for segment in path.segments[:-1]:
        nxt = current.entries.get(segment)
        if not isinstance(nxt, VMapping):
            if nxt is not None:
                logger.debug("replacing %s at '%s' with a mapping",
                             type(nxt).__name__, segment)
            nxt = VMapping()
            current.entries[segment] = nxt
        current = nxt

    current.entries[path.name] = value
    return root


def delete_value(tree: Value, path: PathKey | str) -> bool:
    """Remove the node at *path*, then prune ancestors left empty.

    Returns ``False`` (and leaves *tree* untouched) when the path does not
    resolve.  Emptied ancestor mappings are removed from their own parents
    up to, but never including, the root.
    """
    path = PathKey.coerce(path)

    chain: list[Value] = [tree]
    for segment in path.segments[:-1]:
        node = child_of(chain[-1], segment)
        if node is NotFound:
            return False
        chain.append(node)

    if not _remove(chain[-1], path.name):
        return False

    # chain[i] is the parent of path.segments[i]
    for depth in range(len(chain) - 1, 0, -1):
        node = chain[depth]
        if not isinstance(node, VMapping) or node.entries:
            break
        _remove(chain[depth - 1], path.segments[depth - 1])
        logger.debug("pruned empty mapping '%s'", PathKey(path.segments[:depth]))
    return True


def _remove(container: Value, segment: str) -> bool:
    if isinstance(container, VMapping):
        if segment not in container.entries:
            return False
        del container.entries[segment]
        return True

    if isinstance(container, VSequence):
        idx = sequence_index(container, segment)
        if idx is None:
            return False
        del container.items[idx]
        return True

    return False
