"""Value types for ym-core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VNumber:
    value: int | float

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VNull:
    def __str__(self) -> str:
        return "null"


@dataclass
class VMapping:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


@dataclass
class VSequence:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


class _NotFound:
    """Singleton returned when a path does not resolve."""

    _instance: "_NotFound | None" = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NotFound"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "NotFound"


NotFound = _NotFound()

Scalar = Union[VText, VNumber, VBool, VNull]
Value = Union[VText, VNumber, VBool, VNull, VMapping, VSequence]
