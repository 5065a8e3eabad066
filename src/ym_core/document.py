"""Document: one loaded tree plus the label it came from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .flattener import Entry, flatten
from .getter import get_value
from .path import PathKey
from .setter import delete_value, set_value
from .values import Value, VMapping, _NotFound


@dataclass
class Document:
    """Holds the root Value of a single document.

    ``label`` is the file path the document was read from (``None`` for
    stdin or documents built in memory).  ``source`` is the text the
    document was parsed from; writers patch it instead of dumping the tree
    so comments survive.  The root is replaced when a ``set`` lands on a
    document whose root is not a mapping, so callers should always go
    through :attr:`root` rather than keep a reference.
    """

    root: Value = field(default_factory=VMapping)
    label: str | None = None
    source: str | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Not a dataclass field; set by mutations, read by writers
        self._dirty = False

    @property
    def dirty(self) -> bool:
        """True once any mutation has changed the tree."""
        return self._dirty

    # -- Access ---------------------------------------------------------

    def get(self, path: PathKey | str) -> Value | _NotFound:
        return get_value(self.root, path)

    def entries(self) -> Iterator[Entry]:
        return flatten(self.root)

    # -- Mutation -------------------------------------------------------

    def set(self, path: PathKey | str, value: Value) -> None:
        self.root = set_value(self.root, path, value)
        self._dirty = True

    def delete(self, path: PathKey | str) -> bool:
        removed = delete_value(self.root, path)
        if removed:
            self._dirty = True
        return removed
