"""PathKey: a dotted address into a document tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .errors import EmptyPath

SEPARATOR = "."


@dataclass(frozen=True)
class PathKey:
    """Ordered, non-empty sequence of string segments.

    Splitting is purely structural: ``"a.b.c"`` is ``("a", "b", "c")`` and a
    literal ``.`` inside a key cannot be expressed.  Sequence elements are
    addressed by their decimal index rendered as a segment (``"servers.0"``).
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise EmptyPath("")

    # -- Construction ---------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "PathKey":
        if not text:
            raise EmptyPath(text)
        return cls(tuple(text.split(SEPARATOR)))

    @classmethod
    def coerce(cls, path: "PathKey | str") -> "PathKey":
        """Accept either an already-parsed PathKey or its dotted text."""
        if isinstance(path, PathKey):
            return path
        return cls.parse(path)

    def child(self, segment: str) -> "PathKey":
        return PathKey(self.segments + (segment,))

    # -- Rendering ------------------------------------------------------

    def render(self) -> str:
        return SEPARATOR.join(self.segments)

    def __str__(self) -> str:
        return self.render()

    # -- Structure ------------------------------------------------------

    @property
    def name(self) -> str:
        """The last segment."""
        return self.segments[-1]

    @property
    def parent(self) -> "PathKey | None":
        """Path of the enclosing node, or ``None`` for a top-level key."""
        if len(self.segments) == 1:
            return None
        return PathKey(self.segments[:-1])

    def prefixes(self) -> Iterator["PathKey"]:
        """Yield every proper prefix, shortest first."""
        for end in range(1, len(self.segments)):
            yield PathKey(self.segments[:end])

    def is_prefix_of(self, other: "PathKey") -> bool:
        """Segment-wise prefix test (a path is a prefix of itself)."""
        n = len(self.segments)
        return n <= len(other.segments) and other.segments[:n] == self.segments

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)
