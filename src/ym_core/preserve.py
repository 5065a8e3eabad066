"""Comment-preserving rewrite of YAML text after its tree was mutated.

The old tree (parsed again from the source text) is compared with the new
one and the differences become line edits on the source:

- a changed key has its line, and any lines nested under it, replaced by
  a freshly dumped ``key: value`` block at the same indentation;
- a removed key is cut out together with its nested lines;
- new keys are inserted after the last line of their parent mapping
  (appended to the file for top-level keys).

Comments, blank lines and untouched keys are left exactly as written.
Changes the line editor cannot express (reordered keys, edits inside flow
collections, a root that is not a mapping) make :func:`render_preserving`
return ``None``.  So does any result that does not parse back to the
new tree; the caller then dumps the document instead.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import yaml

from .errors import DocumentError
from .loader import _DocumentDumper, _DocumentLoader, _key_text, load_document, to_native
from .values import Value, VMapping

logger = logging.getLogger(__name__)

# a block mapping key: quoted, or plain up to the first ':' followed by
# whitespace or end of line
_KEY_RE = re.compile(
    r"""^(?P<key>"(?:[^"\\]|\\.)*"|'(?:[^']|'')*'|[^\s'"#?\-][^#]*?|-\S[^#]*?)\s*:(?=\s|$)"""
)
_COMMENT_RE = re.compile(r"\s#.*$")


class _Unsupported(Exception):
    """The change cannot be applied as line edits."""


@dataclass
class _Block:
    """Lines ``start..end`` (inclusive) hold one key and everything under it."""

    start: int
    end: int
    indent: int
    # no inline value: children (or a sequence) follow on the next lines
    open: bool
    comment: str = ""


@dataclass
class _Edit:
    start: int
    stop: int
    lines: list[str]


# ---------------------------------------------------------------------------
# Line index
# ---------------------------------------------------------------------------

def _parse_key(token: str) -> str:
    try:
        return _key_text(yaml.load(token, Loader=_DocumentLoader))
    except yaml.YAMLError as exc:
        raise _Unsupported(f"unreadable key {token!r}") from exc


def _inline_comment(rest: str) -> str:
    m = _COMMENT_RE.search(rest)
    if m is None or any(q in rest[:m.start()] for q in "'\""):
        return ""
    return m.group().strip()


def _index(lines: list[str]) -> dict[tuple[str, ...], _Block]:
    """Map the key path of every block mapping key to its lines.

    Lines under a key with an inline value (multi-line scalars, flow
    collections) and sequence items are never read as keys.
    """
    index: dict[tuple[str, ...], _Block] = {}
    stack: list[tuple[tuple[str, ...], _Block]] = []
    opaque: int | None = None

    def touch(i: int) -> None:
        for _, block in stack:
            block.end = i

    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or stripped[0] in "#%" or stripped in ("---", "..."):
            continue
        body = line.lstrip(" ")
        indent = len(line) - len(body)
        is_item = stripped == "-" or stripped.startswith("- ")

        if opaque is not None:
            if indent > opaque or (indent == opaque and is_item):
                touch(i)
                continue
            opaque = None

        if body[0] == "\t":
            raise _Unsupported(f"line {i + 1} is indented with a tab")

        # a sequence may sit at the same indentation as its key
        while stack and (
            stack[-1][1].indent > indent
            or (stack[-1][1].indent == indent and not (is_item and stack[-1][1].open))
        ):
            stack.pop()

        if is_item:
            if not stack:
                raise _Unsupported("the document is a sequence")
            opaque = indent
            touch(i)
            continue
        if stripped.startswith("---"):
            raise _Unsupported("content on the document start line")

        m = _KEY_RE.match(stripped)
        if m is None:
            raise _Unsupported(f"line {i + 1} is not a block mapping key")
        path = (stack[-1][0] if stack else ()) + (_parse_key(m.group("key")),)
        if path in index:
            raise _Unsupported(f"duplicate key {'.'.join(path)}")

        rest = stripped[m.end():].strip()
        if rest.startswith("#"):
            comment, rest = rest, ""
        else:
            comment = _inline_comment(rest)
        block = _Block(i, i, indent, open=not rest, comment=comment)
        index[path] = block
        stack.append((path, block))
        touch(i)
        if rest:
            opaque = indent
    return index


def _lookup(index: dict[tuple[str, ...], _Block], path: tuple[str, ...]) -> _Block:
    block = index.get(path)
    if block is None:
        raise _Unsupported(f"no line holds {'.'.join(path)}")
    return block


# ---------------------------------------------------------------------------
# Diff
# ---------------------------------------------------------------------------

def _render_entry(key: str, value: Value, indent: int) -> list[str]:
    text = yaml.dump(
        {key: to_native(value)},
        Dumper=_DocumentDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    pad = " " * indent
    return [pad + line if line else line for line in text.splitlines()]


def _replacement(key: str, value: Value, block: _Block) -> list[str]:
    lines = _render_entry(key, value, block.indent)
    if block.comment and len(lines) == 1 and not block.open:
        lines[0] = f"{lines[0]}  {block.comment}"
    return lines


def _diff(old: VMapping, new: VMapping, path: tuple[str, ...], parent: _Block | None,
          index: dict[tuple[str, ...], _Block], line_count: int, edits: list[_Edit]) -> None:
    """Append the edits turning mapping *old* into *new*, in document order."""
    kept = [k for k in old.entries if k in new.entries]
    added = [k for k in new.entries if k not in old.entries]
    if list(new.entries) != kept + added:
        raise _Unsupported(f"keys of {'.'.join(path) or 'the root'} were reordered")

    for key, old_child in old.entries.items():
        new_child = new.entries.get(key)
        if old_child == new_child:
            continue
        child_path = path + (key,)
        block = _lookup(index, child_path)
        if new_child is None:
            edits.append(_Edit(block.start, block.end + 1, []))
        elif (isinstance(old_child, VMapping) and isinstance(new_child, VMapping)
                and old_child.entries and block.open):
            _diff(old_child, new_child, child_path, block, index, line_count, edits)
        else:
            edits.append(_Edit(block.start, block.end + 1, _replacement(key, new_child, block)))

    if not added:
        return
    if old.entries:
        indent = _lookup(index, path + (next(iter(old.entries)),)).indent
    elif parent is None:
        indent = 0
    else:
        raise _Unsupported(f"{'.'.join(path)} is an inline empty mapping")
    pos = line_count if parent is None else parent.end + 1
    lines: list[str] = []
    for key in added:
        lines.extend(_render_entry(key, new.entries[key], indent))
    edits.append(_Edit(pos, pos, lines))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def render_preserving(source: str, root: Value) -> str | None:
    """Rewrite *source* so it parses to *root*, or ``None`` if that cannot
    be done without reformatting the document."""
    try:
        original = load_document(source).root
    except DocumentError:
        return None
    if not isinstance(original, VMapping) or not isinstance(root, VMapping):
        return None
    if original == root:
        return source

    lines = source.splitlines()
    edits: list[_Edit] = []
    try:
        _diff(original, root, (), None, _index(lines), len(lines), edits)
    except _Unsupported as exc:
        logger.debug("cannot patch lines: %s", exc)
        return None

    # back to front; at equal positions the edit found later goes first
    # so that earlier insertions end up above it
    for _, edit in sorted(enumerate(edits), key=lambda p: (p[1].start, p[0]), reverse=True):
        lines[edit.start:edit.stop] = edit.lines

    text = "\n".join(lines)
    if text and (source.endswith("\n") or not source.strip()):
        text += "\n"

    try:
        patched = load_document(text).root
    except DocumentError as exc:
        logger.debug("patched text does not parse: %s", exc)
        return None
    if patched != root:
        logger.debug("patched text does not match the document")
        return None
    return text
