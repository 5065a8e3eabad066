"""Copy / move of values within one document or across two."""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass
from typing import Protocol

from .document import Document
from .errors import InvalidLocation, SourceNotFound
from .path import PathKey
from .values import Value, NotFound

logger = logging.getLogger(__name__)

LOCATION_SEPARATOR = ":"


@dataclass(frozen=True)
class Location:
    """A ``file:path`` pair naming one node in one document."""

    file: str
    path: PathKey

    def __str__(self) -> str:
        return f"{self.file}{LOCATION_SEPARATOR}{self.path}"


class DocumentProvider(Protocol):
    """Loads the document stored in *file*.

    With ``create=True`` a missing file must give an empty document
    instead of failing.
    """

    def __call__(self, file: str, create: bool = False) -> Document: ...


# ---------------------------------------------------------------------------
# Token parsing
# ---------------------------------------------------------------------------

def parse_source(token: str) -> Location:
    """Parse a required ``file:path`` token."""
    file, sep, key = token.partition(LOCATION_SEPARATOR)
    if not sep or not file or not key:
        raise InvalidLocation(
            f"Invalid file:key pair: {token} (expected format: file.yaml:key.path)"
        )
    return Location(file, PathKey.parse(key))


def parse_destination(token: str | None, source: Location) -> Location:
    """Parse a destination token, filling omitted parts from *source*.

    - ``file:path`` → both given
    - ``file:``     → source path in *file*
    - ``:path`` or ``path`` → *path* in the source file
    """
    if not token:
        raise InvalidLocation("destination file and destination key cannot both be omitted")

    file, sep, key = token.partition(LOCATION_SEPARATOR)
    if not sep:
        return Location(source.file, PathKey.parse(token))
    if not file and not key:
        raise InvalidLocation(
            f"Invalid file:key pair: {token} (file and key cannot both be empty)"
        )
    return Location(
        file or source.file,
        PathKey.parse(key) if key else source.path,
    )


# ---------------------------------------------------------------------------
# Document-level operations
# ---------------------------------------------------------------------------

def _require(doc: Document, path: PathKey) -> Value:
    value = doc.get(path)
    if value is NotFound:
        raise SourceNotFound(str(path), doc.label)
    return value


def copy_value(src_doc: Document, src_path: PathKey | str,
               dst_doc: Document, dst_path: PathKey | str) -> None:
    """Write a deep copy of the source node at the destination.

    The source document is left unchanged.  Copying a node onto itself
    only checks that it exists.
    """
    src_path = PathKey.coerce(src_path)
    dst_path = PathKey.coerce(dst_path)
    value = _require(src_doc, src_path)
    if src_doc is dst_doc and src_path == dst_path:
        return
    dst_doc.set(dst_path, copy.deepcopy(value))
    logger.debug("copied %s → %s", src_path, dst_path)


def move_value(src_doc: Document, src_path: PathKey | str,
               dst_doc: Document, dst_path: PathKey | str) -> None:
    """Copy the source node to the destination, then delete the source.

    Nothing is mutated when the source is absent.  Moving a node onto
    itself is a no-op.  When both paths are in the same document and one
    contains the other, the source is detached first so the delete cannot
    hit the freshly written value.
    """
    src_path = PathKey.coerce(src_path)
    dst_path = PathKey.coerce(dst_path)
    value = _require(src_doc, src_path)

    same_doc = src_doc is dst_doc
    if same_doc and src_path == dst_path:
        return

    if same_doc and (src_path.is_prefix_of(dst_path) or dst_path.is_prefix_of(src_path)):
        src_doc.delete(src_path)
        dst_doc.set(dst_path, value)
    else:
        dst_doc.set(dst_path, value)
        src_doc.delete(src_path)
    logger.debug("moved %s → %s", src_path, dst_path)


# ---------------------------------------------------------------------------
# Token-level entry points
# ---------------------------------------------------------------------------

class _Session:
    """Loads each file at most once for the duration of one operation."""

    def __init__(self, provider: DocumentProvider) -> None:
        self._provider = provider
        self._docs: dict[str, Document] = {}

    def open(self, file: str, create: bool = False) -> Document:
        key = os.path.realpath(file)
        if key not in self._docs:
            self._docs[key] = self._provider(file, create=create)
        return self._docs[key]


def _resolve(src_token: str, dst_token: str | None,
             provider: DocumentProvider) -> tuple[Document, Location, Document, Location]:
    src = parse_source(src_token)
    dst = parse_destination(dst_token, src)
    session = _Session(provider)
    src_doc = session.open(src.file)
    dst_doc = session.open(dst.file, create=True)
    return src_doc, src, dst_doc, dst


def _changed(src_doc: Document, dst_doc: Document) -> list[Document]:
    # destination first: it must be persisted before the source loses its value
    docs = [dst_doc] if dst_doc.dirty else []
    if src_doc is not dst_doc and src_doc.dirty:
        docs.append(src_doc)
    return docs


def apply_copy(src_token: str, dst_token: str | None,
               provider: DocumentProvider) -> list[Document]:
    """Copy between ``file:path`` tokens.  Returns the documents to persist."""
    src_doc, src, dst_doc, dst = _resolve(src_token, dst_token, provider)
    copy_value(src_doc, src.path, dst_doc, dst.path)
    return _changed(src_doc, dst_doc)


def apply_move(src_token: str, dst_token: str | None,
               provider: DocumentProvider) -> list[Document]:
    """Move between ``file:path`` tokens.  Returns the documents to persist."""
    src_doc, src, dst_doc, dst = _resolve(src_token, dst_token, provider)
    move_value(src_doc, src.path, dst_doc, dst.path)
    return _changed(src_doc, dst_doc)
