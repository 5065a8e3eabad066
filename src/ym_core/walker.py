"""Expand file / directory arguments into the document files to search."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple

from .config import DEFAULT_EXTENSIONS
from .errors import DocumentError

logger = logging.getLogger(__name__)


class Candidate(NamedTuple):
    path: Path
    explicit: bool  # named on the command line rather than found in a directory


def iter_document_files(
    paths: Iterable[str | Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Iterator[Candidate]:
    """Yield candidate files in argument order.

    Files are yielded as given, whatever their extension.  Directories are
    always walked recursively, in sorted order, keeping only files whose
    suffix is in *extensions*.
    """
    exts = {e.lower() for e in extensions}
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            yield Candidate(path, True)
        elif path.is_dir():
            yield from _walk_dir(path, exts)
        else:
            raise DocumentError(f"'{raw}' is not a file or directory", str(raw))


def _walk_dir(directory: Path, exts: set[str]) -> Iterator[Candidate]:
    try:
        children = sorted(directory.iterdir())
    except OSError as exc:
        raise DocumentError(f"Failed to read directory '{directory}': {exc}", str(directory)) from exc

    for child in children:
        if child.is_dir():
            yield from _walk_dir(child, exts)
        elif child.is_file() and child.suffix.lower() in exts:
            yield Candidate(child, False)
        else:
            logger.debug("skipping %s", child)
