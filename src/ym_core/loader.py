"""YAML load / dump adapters between PyYAML and the Value model."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .document import Document
from .errors import DocumentError
from .values import Value, VBool, VMapping, VNull, VNumber, VSequence, VText

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


def _without_timestamps(resolvers: dict) -> dict:
    return {
        first: [(tag, regexp) for tag, regexp in entries if tag != _TIMESTAMP_TAG]
        for first, entries in resolvers.items()
    }


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader that leaves dates and timestamps as plain strings."""


class _DocumentDumper(yaml.SafeDumper):
    """SafeDumper that writes date-like strings back unquoted."""


_DocumentLoader.yaml_implicit_resolvers = _without_timestamps(yaml.SafeLoader.yaml_implicit_resolvers)
_DocumentDumper.yaml_implicit_resolvers = _without_timestamps(yaml.SafeDumper.yaml_implicit_resolvers)


# ---------------------------------------------------------------------------
# Native <-> Value conversion
# ---------------------------------------------------------------------------

def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def to_value(data: Any, label: str | None = None) -> Value:
    """Convert PyYAML output (dicts, lists, scalars) into a Value tree.

    Raises :class:`DocumentError` for a recursive alias (a collection that
    contains itself) and for values with no Value counterpart, such as
    ``!!binary`` or ``!!set``.
    """
    return _convert(data, label, set())


def _convert(data: Any, label: str | None, active: set[int]) -> Value:
    where = f" in '{label}'" if label else ""
    if isinstance(data, (dict, list)):
        # ids of the collections currently being converted, root to here
        if id(data) in active:
            raise DocumentError(f"Recursive alias{where} cannot be represented", label)
        active.add(id(data))
        try:
            if isinstance(data, dict):
                return VMapping({_key_text(k): _convert(v, label, active) for k, v in data.items()})
            return VSequence([_convert(item, label, active) for item in data])
        finally:
            active.discard(id(data))
    if data is None:
        return VNull()
    # bool before int: bool is an int subclass
    if isinstance(data, bool):
        return VBool(data)
    if isinstance(data, (int, float)):
        return VNumber(data)
    if isinstance(data, str):
        return VText(data)
    raise DocumentError(
        f"Unsupported YAML value of type '{type(data).__name__}'{where}: "
        "only mappings, sequences and scalars are supported",
        label,
    )


def to_native(value: Value) -> Any:
    """Convert a Value tree back into plain Python data for dumping."""
    if isinstance(value, VMapping):
        return {k: to_native(v) for k, v in value.entries.items()}
    if isinstance(value, VSequence):
        return [to_native(item) for item in value.items]
    if isinstance(value, VNull):
        return None
    return value.value


# ---------------------------------------------------------------------------
# Text level
# ---------------------------------------------------------------------------

def load_document(text: str, label: str | None = None) -> Document:
    """Parse a single YAML document.  An empty stream gives an empty mapping."""
    try:
        data = yaml.load(text, Loader=_DocumentLoader)
    except yaml.YAMLError as exc:
        where = f" from '{label}'" if label else ""
        raise DocumentError(f"Failed to parse YAML{where}: {exc}", label) from exc

    root = VMapping() if data is None else to_value(data, label)
    return Document(root=root, label=label, source=text)


def dump_document(document: Document) -> str:
    return yaml.dump(
        to_native(document.root),
        Dumper=_DocumentDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def render_document(document: Document) -> str:
    """Text to persist for *document*.

    A document parsed from text keeps that text's comments, blank lines and
    key layout: only the lines of changed keys are rewritten.  Documents
    built in memory, and edits the line editor cannot express, get a full
    :func:`dump_document`.
    """
    if document.source is not None:
        from .preserve import render_preserving

        text = render_preserving(document.source, document.root)
        if text is not None:
            return text
        logger.debug("%s: layout not kept, dumping the whole document",
                     document.label or "<document>")
    return dump_document(document)


# ---------------------------------------------------------------------------
# File level
# ---------------------------------------------------------------------------

def read_document(path: str | Path, missing_ok: bool = False) -> Document:
    """Read and parse *path*.

    With *missing_ok*, a path that does not exist yields a new empty
    document labelled with that path (used for copy destinations).
    """
    label = str(path)
    p = Path(path)
    if missing_ok and not p.exists():
        logger.debug("'%s' does not exist, starting from an empty document", label)
        return Document(label=label)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Failed to read file '{label}': {exc}", label) from exc
    return load_document(text, label)


def write_document(document: Document, path: str | Path | None = None) -> None:
    """Serialize *document* to *path* (default: the document's own label)."""
    target = path if path is not None else document.label
    if target is None:
        raise DocumentError("Document has no file to write to")
    try:
        Path(target).write_text(render_document(document), encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Failed to write to '{target}': {exc}", str(target)) from exc
    logger.info("wrote %s", target)
