"""Matcher: regex search over flattened document paths."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

from .errors import InvalidPattern
from .flattener import Entry, flatten

if TYPE_CHECKING:
    from .document import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchHit:
    """An Entry matched by :func:`search`, tagged with its document label."""

    label: str | None
    entry: Entry


def compile_pattern(text: str) -> re.Pattern[str]:
    """Compile *text*, raising :class:`InvalidPattern` on bad syntax."""
    try:
        return re.compile(text)
    except re.error as exc:
        raise InvalidPattern(text, str(exc)) from exc


def matches(pattern: re.Pattern[str], entry: Entry) -> bool:
    """True if *pattern* occurs anywhere in the entry's dotted path."""
    return pattern.search(entry.path.render()) is not None


def search(pattern: re.Pattern[str] | str, documents: Iterable["Document"]) -> Iterator[SearchHit]:
    """Return matching entries of each document, documents in caller order.

    A string pattern is compiled eagerly, so a malformed pattern fails
    before the first document is consumed.
    """
    if isinstance(pattern, str):
        pattern = compile_pattern(pattern)
    return _search(pattern, documents)


def _search(pattern: re.Pattern[str], documents: Iterable["Document"]) -> Iterator[SearchHit]:
    for doc in documents:
        count = 0
        for entry in flatten(doc.root):
            if matches(pattern, entry):
                count += 1
                yield SearchHit(doc.label, entry)
        logger.debug("%s: %d match(es) for %r", doc.label or "<stdin>", count, pattern.pattern)
