"""ym-core: path-addressed search and patch engine for YAML documents."""

from .document import Document
from .errors import (
    DocumentError,
    EmptyPath,
    InvalidLocation,
    InvalidPattern,
    SourceNotFound,
    YmCoreError,
)
from .flattener import Entry, flatten
from .getter import get_value
from .loader import dump_document, load_document, read_document, render_document, write_document
from .matcher import SearchHit, compile_pattern, matches, search
from .operations import apply_copy, apply_move, apply_set, apply_unset
from .path import PathKey
from .setter import delete_value, set_value
from .transfer import Location, copy_value, move_value
from .values import (
    NotFound,
    Value,
    VBool,
    VMapping,
    VNull,
    VNumber,
    VSequence,
    VText,
    _NotFound,
)

__all__ = [
    "Document",
    "PathKey",
    "Entry",
    "SearchHit",
    "Location",
    "Value",
    "VBool",
    "VMapping",
    "VNull",
    "VNumber",
    "VSequence",
    "VText",
    "NotFound",
    "flatten",
    "compile_pattern",
    "matches",
    "search",
    "get_value",
    "set_value",
    "delete_value",
    "copy_value",
    "move_value",
    "apply_set",
    "apply_unset",
    "apply_copy",
    "apply_move",
    "load_document",
    "dump_document",
    "render_document",
    "read_document",
    "write_document",
    "YmCoreError",
    "EmptyPath",
    "InvalidPattern",
    "SourceNotFound",
    "InvalidLocation",
    "DocumentError",
]
