"""Batch entry points used by the command-line layer."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .coerce import coerce_scalar
from .document import Document
from .matcher import SearchHit, search
from .path import PathKey
from .transfer import apply_copy, apply_move

logger = logging.getLogger(__name__)

__all__ = ["apply_set", "apply_unset", "apply_copy", "apply_move", "search", "SearchHit"]


def apply_set(document: Document, assignments: Iterable[tuple[str, str]]) -> Document:
    """Set each ``(path, raw_text)`` pair on *document*, in order.

    Every path is parsed before the first write, so an empty path aborts
    the whole batch with the document untouched.  Raw text goes through
    :func:`coerce_scalar`.
    """
    parsed: Sequence[tuple[PathKey, str]] = [
        (PathKey.parse(path), raw) for path, raw in assignments
    ]
    for path, raw in parsed:
        value = coerce_scalar(raw)
        document.set(path, value)
        logger.debug("set %s = %r", path, value)
    return document


def apply_unset(document: Document, paths: Iterable[str]) -> Document:
    """Delete each path from *document*; absent paths are skipped."""
    parsed = [PathKey.parse(path) for path in paths]
    for path in parsed:
        if document.delete(path):
            logger.debug("unset %s", path)
        else:
            logger.debug("unset %s: not present", path)
    return document
