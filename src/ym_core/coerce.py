"""Raw text → scalar Value conversion for command-line input."""

from __future__ import annotations

import re

from .values import Scalar, VBool, VNumber, VText

_INT_RE = re.compile(r"^[-+]?\d+$")
_FLOAT_RE = re.compile(r"^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")


def coerce_scalar(raw: str) -> Scalar:
    """Convert a raw string to the first matching scalar Value.

    Attempts, in order:

    - ``true`` / ``false`` → VBool
    - integer literal → VNumber(int)
    - decimal or exponent literal → VNumber(float)
    - anything else → VText (kept verbatim)
    """
    if raw == "true":
        return VBool(True)
    if raw == "false":
        return VBool(False)
    if _INT_RE.match(raw):
        return VNumber(int(raw))
    if _FLOAT_RE.match(raw):
        return VNumber(float(raw))
    return VText(raw)
