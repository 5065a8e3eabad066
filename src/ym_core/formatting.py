"""Console rendering of search hits."""

from __future__ import annotations

from .matcher import SearchHit
from .values import Value, VText

ELLIPSIS = "..."


def format_scalar(value: Value) -> str:
    """Render a leaf value the way it would be typed on the command line."""
    if isinstance(value, VText):
        return value.value
    return str(value)


def truncate(text: str, width: int | None) -> str:
    """Cut *text* to *width* columns, marking the cut with ``...``."""
    if width is None or width <= 0 or len(text) <= width:
        return text
    return text[: max(width - len(ELLIPSIS), 0)] + ELLIPSIS


def format_hit(hit: SearchHit, show_label: bool = False, width: int | None = None) -> str:
    """``label:path=value`` when *show_label*, otherwise ``path=value``."""
    line = f"{hit.entry.path}={format_scalar(hit.entry.value)}"
    if show_label and hit.label is not None:
        line = f"{hit.label}:{line}"
    return truncate(line, width)
