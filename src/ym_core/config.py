"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from typing import Mapping

DEFAULT_EXTENSIONS = (".yaml", ".yml")
DEFAULT_WIDTH = 80


def _terminal_width(env: Mapping[str, str]) -> int:
    # COLUMNS first, then the attached terminal, then 80
    raw = env.get("COLUMNS", "")
    if raw.isdecimal() and int(raw) > 0:
        return int(raw)
    return shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns or DEFAULT_WIDTH


def _extensions(env: Mapping[str, str]) -> tuple[str, ...]:
    raw = env.get("YM_EXTENSIONS", "")
    exts = []
    for item in raw.split(","):
        item = item.strip().lower()
        if item:
            exts.append(item if item.startswith(".") else f".{item}")
    return tuple(exts) or DEFAULT_EXTENSIONS


@dataclass
class Settings:
    """Per-invocation settings for the ``ym`` command."""

    width: int = DEFAULT_WIDTH
    extensions: tuple[str, ...] = field(default=DEFAULT_EXTENSIONS)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            width=_terminal_width(env),
            extensions=_extensions(env),
            log_level=env.get("YM_LOG_LEVEL", "WARNING").upper(),
        )
